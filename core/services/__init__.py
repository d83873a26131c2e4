# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .playground_service import PlaygroundService
from . import snippet_mapper

__all__ = [
    "PlaygroundService",
    "snippet_mapper",
]
