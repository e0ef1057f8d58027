from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus


def infer_status(
    *,
    total_hours: Optional[float],
    has_check_in: bool,
    has_check_out: bool,
    tag_work_minutes: int = 0,
    flowace_minutes: int = 0,
) -> AttendanceStatus:
    """Status for a CSV row that did not state one.

    Any evidence of work means PRESENT, a lone punch means LATE, nothing at
    all means ABSENT.
    """
    if (total_hours or 0) > 0 or (has_check_in and has_check_out) or tag_work_minutes > 0 or flowace_minutes > 0:
        return AttendanceStatus.PRESENT
    if has_check_in or has_check_out:
        return AttendanceStatus.LATE
    return AttendanceStatus.ABSENT
