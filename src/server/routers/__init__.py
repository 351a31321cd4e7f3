"""API routers."""

from server.routers.courses import router as courses_router
from server.routers.render import router as render_router

__all__ = ["courses_router", "render_router"]
