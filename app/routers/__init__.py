# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - planes.py: Public plan listing and Pro price
# - organizations.py: Property wallet status and coefficient summary
# - billing.py: Stateless token cost and coefficient previews
# - super_admin.py: Plan catalog administration
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import planes
from . import organizations
from . import billing
from . import super_admin

__all__ = [
    "health",
    "planes",
    "organizations",
    "billing",
    "super_admin",
]
