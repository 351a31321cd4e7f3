"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from lessonrender.exceptions import CourseNotFoundError, FetchError, ParseError, TopicNotFoundError
from lessonrender.utils.logging_config import get_logger
from server.routers import courses_router, render_router
from server.server_config import APP_DESCRIPTION, APP_TITLE

logger = get_logger(__name__)

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(courses_router)
app.include_router(render_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(CourseNotFoundError)
@app.exception_handler(TopicNotFoundError)
async def not_found_handler(request: Request, exc: LookupError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(FetchError)
@app.exception_handler(ParseError)
async def catalog_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Catalog unavailable", extra={"path": request.url.path, "error": str(exc)})
    return _error(status.HTTP_502_BAD_GATEWAY, str(exc))


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
