"""Custom exceptions for lessonrender."""


class LessonRenderError(Exception):
    """Base exception for lessonrender operations."""


class FetchError(LessonRenderError):
    """Error during catalog fetching."""


class CatalogNotAvailableError(FetchError):
    """The catalog URL answered with 404."""


class RateLimitError(FetchError):
    """Rate limited by the content store."""


class ParseError(LessonRenderError):
    """Catalog data could not be parsed."""


class CourseNotFoundError(LessonRenderError, LookupError):
    """No course with the requested id."""


class TopicNotFoundError(LessonRenderError, LookupError):
    """No topic with the requested id in the course."""
