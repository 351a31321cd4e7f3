"""Ad-hoc rendering endpoint."""

from fastapi import APIRouter

from server.models import RenderRequest, RenderResponse
from server.query_processor import process_render

router = APIRouter()


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Render a list of authored content blocks.

    **This endpoint groups the blocks into sections, highlights code and colors tables,**
    then returns the structured lesson with its summary, section tree and HTML.
    Unknown block types are skipped.
    """
    return process_render(render_request)
