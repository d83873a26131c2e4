# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, CORS middleware, error handlers, GET /
# - config.py: Environment variable loading and settings
# - exceptions.py: Error taxonomy and its HTTP rendering
# - dependencies.py: Access to the shared gist client
# - responses.py: JSON response helper
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# the gist round trip to core/services and lib/.
# =============================================================================
