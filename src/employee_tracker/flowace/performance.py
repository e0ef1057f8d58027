from __future__ import annotations

from typing import Optional

from ..core.enums import PerformanceCategory


def performance_category(hours: Optional[float], productivity: Optional[float]) -> PerformanceCategory:
    hours = hours or 0
    productivity = productivity or 0
    if hours < 4:
        return PerformanceCategory.LOW_HOURS
    if hours >= 8 and productivity > 80:
        return PerformanceCategory.EXCELLENT
    if hours >= 6 and productivity > 60:
        return PerformanceCategory.GOOD
    if productivity > 40:
        return PerformanceCategory.AVERAGE
    return PerformanceCategory.NEEDS_IMPROVEMENT
