"""Local configuration for lessonrender."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".lessonrender_cache"
DEFAULT_CACHE_TTL_SECONDS = 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "lessonrender/0.1"
DEFAULT_LOG_LEVEL = "INFO"

# Remote catalog JSON; when unset the catalog bundled with the package is used.
LESSONRENDER_CATALOG_URL = os.getenv("LESSONRENDER_CATALOG_URL") or None

# Local-only cache directory for fetched catalogs.
LESSONRENDER_CACHE_PATH = Path(os.getenv("LESSONRENDER_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
LESSONRENDER_CACHE_TTL_SECONDS = int(os.getenv("LESSONRENDER_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
LESSONRENDER_FETCH_TIMEOUT_S = float(os.getenv("LESSONRENDER_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
LESSONRENDER_FETCH_MAX_RETRIES = int(os.getenv("LESSONRENDER_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
LESSONRENDER_FETCH_BACKOFF_S = float(os.getenv("LESSONRENDER_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
LESSONRENDER_USER_AGENT = os.getenv("LESSONRENDER_USER_AGENT", DEFAULT_USER_AGENT)
LESSONRENDER_LOG_LEVEL = os.getenv("LESSONRENDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
