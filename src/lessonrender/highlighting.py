"""Lexical highlighting for Python snippets embedded in lessons.

Each line is handled on its own in two passes:

1. A quote-aware scan finds where a ``#`` comment starts, if anywhere.
2. The code before the comment is split into lexemes by a small scanner that
   tries, at every position and in this order: a double-quoted string, a
   single-quoted string, an identifier, a number, a whitespace run and finally
   a single fallback character.

The lexemes are then classified and the comment, when present, is appended as
one final token. The result always covers the line exactly, so joining the
token texts gives the line back.

Quote state never crosses line boundaries: a triple-quoted string that spans
several lines is highlighted line by line and the lines after the opening one
come out wrong.
"""

from __future__ import annotations

from string import ascii_letters, digits
from typing import Final

from lessonrender.schemas import Token, TokenKind

KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "as",
        "assert",
        "break",
        "class",
        "continue",
        "def",
        "del",
        "elif",
        "else",
        "except",
        "False",
        "finally",
        "for",
        "from",
        "global",
        "if",
        "import",
        "in",
        "is",
        "lambda",
        "None",
        "nonlocal",
        "not",
        "or",
        "pass",
        "raise",
        "return",
        "True",
        "try",
        "while",
        "with",
        "yield",
    }
)

BUILTINS: Final[frozenset[str]] = frozenset(
    {
        "print",
        "len",
        "range",
        "int",
        "float",
        "str",
        "list",
        "dict",
        "set",
        "tuple",
        "input",
        "type",
        "help",
        "sum",
    }
)

_ESCAPE: Final = "\\"
_QUOTES: Final = frozenset({'"', "'"})
_COMMENT: Final = "#"
_DIGITS: Final = frozenset(digits)
_IDENT_START: Final = frozenset(ascii_letters + "_")
_IDENT_CHARS: Final = _IDENT_START | _DIGITS


def find_comment_start(line: str) -> int:
    """Return the index of the ``#`` opening a comment, or -1.

    A ``#`` inside a single- or double-quoted run does not count. A backslash
    makes the next character inert, inside or outside quotes.
    """
    in_single = False
    in_double = False
    escaped = False
    for index, ch in enumerate(line):
        if escaped:
            escaped = False
            continue
        if ch == _ESCAPE:
            escaped = True
        elif not in_double and ch == "'":
            in_single = not in_single
        elif not in_single and ch == '"':
            in_double = not in_double
        elif not in_single and not in_double and ch == _COMMENT:
            return index
    return -1


def split_lexemes(code: str) -> list[str]:
    """Split a comment-free piece of code into raw lexemes."""
    lexemes: list[str] = []
    length = len(code)
    pos = 0
    while pos < length:
        ch = code[pos]
        if ch in _QUOTES:
            end = _scan_string(code, pos)
        elif ch in _IDENT_START:
            end = _scan_while(code, pos + 1, _IDENT_CHARS)
        elif ch in _DIGITS:
            end = _scan_number(code, pos)
        elif ch.isspace():
            end = pos + 1
            while end < length and code[end].isspace():
                end += 1
        else:
            end = pos + 1
        lexemes.append(code[pos:end])
        pos = end
    return lexemes


def _scan_while(code: str, pos: int, allowed: frozenset[str]) -> int:
    while pos < len(code) and code[pos] in allowed:
        pos += 1
    return pos


def _scan_string(code: str, start: int) -> int:
    # Unterminated strings run to the end of the code.
    quote = code[start]
    pos = start + 1
    length = len(code)
    while pos < length:
        ch = code[pos]
        if ch == _ESCAPE:
            pos += 2
        elif ch == quote:
            return pos + 1
        else:
            pos += 1
    return length


def _scan_number(code: str, start: int) -> int:
    end = _scan_while(code, start, _DIGITS)
    if end + 1 < len(code) and code[end] == "." and code[end + 1] in _DIGITS:
        end = _scan_while(code, end + 1, _DIGITS)
    return end


def classify_lexeme(lexeme: str) -> TokenKind:
    if lexeme.isspace():
        return TokenKind.WHITESPACE
    first = lexeme[0]
    if first in _QUOTES:
        return TokenKind.STRING
    if first in _DIGITS:
        return TokenKind.NUMBER
    if lexeme in KEYWORDS:
        return TokenKind.KEYWORD
    if lexeme in BUILTINS:
        return TokenKind.BUILTIN
    return TokenKind.PLAIN


def tokenize_line(line: str) -> list[Token]:
    """Tokenize one line of code.

    Raises:
        ValueError: If ``line`` contains a line feed.
    """
    if "\n" in line:
        raise ValueError("tokenize_line expects a single line; use tokenize_code")

    comment_at = find_comment_start(line)
    code = line if comment_at == -1 else line[:comment_at]

    tokens = [
        Token(text=lexeme, kind=classify_lexeme(lexeme)) for lexeme in split_lexemes(code)
    ]
    if comment_at != -1:
        tokens.append(Token(text=line[comment_at:], kind=TokenKind.COMMENT))
    return tokens


def tokenize_code(text: str | None) -> list[list[Token]]:
    """Tokenize a multi-line snippet, one token list per line."""
    cleaned = (text or "").replace("\r", "")
    return [tokenize_line(line) for line in cleaned.split("\n")]
