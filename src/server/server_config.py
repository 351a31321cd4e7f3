"""Server configuration."""

from __future__ import annotations

import os

APP_TITLE = "lessonrender"
APP_DESCRIPTION = "Render authored course lessons into structured documents."

# Upper bound on courses returned by one catalog listing.
MAX_RESULTS = int(os.getenv("LESSONRENDER_MAX_RESULTS", "100"))

# Upper bound on blocks accepted by POST /api/render.
MAX_RENDER_BLOCKS = int(os.getenv("LESSONRENDER_MAX_RENDER_BLOCKS", "2000"))
