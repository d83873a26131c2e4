# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable clients:
# - gist_client.py: Typed async wrapper for the GitHub gist API
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.gist_client import GistClient, GistClientConfig

__all__ = [
    "GistClient",
    "GistClientConfig",
]
