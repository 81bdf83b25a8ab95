"""
Domain time utilities (pure).

Centralized timestamp validation helper.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime


def require_aware_timestamp(name: str, value: datetime) -> None:
    """
    Enforces that instants handed to the domain are unambiguous.

    Invariants:
    - Timestamps must be datetime instances.
    - Timestamps must be timezone-aware (any offset).
    """

    if not isinstance(value, datetime):
        raise ValueError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")
