# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Asambleas PH API:
# - test_coefficients.py, test_token_cost.py, test_plan_limits.py,
#   test_plan_status.py, test_pricing_admin.py: Pure rule tests
# - test_models.py: Pydantic model validation
# - test_services.py: Services and Supabase wrapper with mocked client
# - test_routes.py: API endpoints through TestClient
#
# Run tests with: pytest
# =============================================================================
