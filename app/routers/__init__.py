# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - gists.py: Fetch and create playground snippets
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import gists

__all__ = [
    "gists",
]
