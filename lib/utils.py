# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import math
from typing import Any
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        organization_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        organization_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Numeric Utilities
# =============================================================================

def to_non_negative_int(value: Any) -> int:
    """
    Coerce a database value to a whole, non-negative number.

    None, non-numeric and non-finite values become 0; fractions are floored.

    Example:
        to_non_negative_int("12.7")  # 12
        to_non_negative_int(None)    # 0
        to_non_negative_int(-5)      # 0
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0

    if not math.isfinite(number):
        return 0
    return max(0, math.floor(number))
