# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the playground gist server:
# - test_models.py: Unit tests for Pydantic model validation
# - test_snippet_mapper.py: Snippet <-> gist mapping
# - test_gist_client.py: GitHub client against a mock transport
# - test_api.py: Endpoints, error bodies and CORS through TestClient
# - test_config.py: Settings loading and validation
#
# Run tests with: pytest
# =============================================================================
