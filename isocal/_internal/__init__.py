"""Internal utilities for isocal.

This package contains private implementation details. The
arithmetic layers live in their own modules (``ordinal``,
``calendar``, ``isoweek``) and are imported from there; only the
validation helpers are re-exported here.

Note: This module is not part of the public API.
"""

from __future__ import annotations

from isocal._internal.validation import (
    check_range,
    require_int,
    validate_month,
    validate_weekday,
)

__all__: list[str] = [
    "check_range",
    "require_int",
    "validate_month",
    "validate_weekday",
]
