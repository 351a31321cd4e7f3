"""Text normalization shared by color matching, catalog search and sorting."""

from __future__ import annotations

import unicodedata

_COMBINING_START = 0x0300
_COMBINING_END = 0x036F
# Sorts after every "n" + letter and before "o".
_N_TILDE_KEY = "n\uffff"


def normalize(text: str | None) -> str:
    """Lowercase ``text`` and strip combining diacritical marks.

    The string is lowercased, decomposed with NFD and every code point in
    U+0300..U+036F is dropped, so "Rójo Oscuro" becomes "rojo oscuro".
    Whitespace is left as authored.
    """
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    return "".join(
        ch for ch in decomposed if not _COMBINING_START <= ord(ch) <= _COMBINING_END
    )


def spanish_sort_key(text: str | None) -> str:
    """Collation key for Spanish titles.

    Case and accents are ignored like in :func:`normalize`, but "ñ" sorts as
    its own letter between "n" and "o".
    """
    folded = unicodedata.normalize("NFC", (text or "").lower())
    return normalize(folded.replace("ñ", _N_TILDE_KEY))
