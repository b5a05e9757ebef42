"""Calendar unit enumerations.

    - Month: Month of the year (JANUARY=1 .. DECEMBER=12)
    - Weekday: ISO day of the week (MONDAY=1 .. SUNDAY=7)
"""

from __future__ import annotations

from isocal.units.month import Month
from isocal.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
]
