"""lessonrender: render authored course lessons into structured documents."""

from lessonrender.exceptions import (
    CatalogNotAvailableError,
    CourseNotFoundError,
    FetchError,
    LessonRenderError,
    ParseError,
    RateLimitError,
    TopicNotFoundError,
)
from lessonrender.highlighting import tokenize_code, tokenize_line
from lessonrender.ingestion import RenderOptions, render_topic
from lessonrender.inline import split_inline_code
from lessonrender.render import parse_blocks, render_block, render_lesson
from lessonrender.schemas import LessonResult, RenderedLesson, Section, Token, TokenKind
from lessonrender.sections import sectionize
from lessonrender.text import normalize

__all__ = [
    "CatalogNotAvailableError",
    "CourseNotFoundError",
    "FetchError",
    "LessonRenderError",
    "LessonResult",
    "ParseError",
    "RateLimitError",
    "RenderOptions",
    "RenderedLesson",
    "Section",
    "Token",
    "TokenKind",
    "TopicNotFoundError",
    "normalize",
    "parse_blocks",
    "render_block",
    "render_lesson",
    "render_topic",
    "sectionize",
    "split_inline_code",
    "tokenize_code",
    "tokenize_line",
]
