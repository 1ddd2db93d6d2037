# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - rules/: Pure billing and entitlement rules (no I/O)
# - models/: Pydantic schemas for data validation
# - services/: Database reads combined with the rules
#
# Code in core/rules/ must not import from FastAPI or the database layer.
# This keeps the rules testable and reusable.
# =============================================================================
