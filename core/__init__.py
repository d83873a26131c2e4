# =============================================================================
# core/ - Playground Logic Package
# =============================================================================
# This package contains the snippet logic:
# - models/: Pydantic schemas for snippets and gists
# - services/: Snippet <-> gist mapping and the fetch/create operations
#
# Code in this package does not define routes; HTTP concerns live in app/.
# =============================================================================
