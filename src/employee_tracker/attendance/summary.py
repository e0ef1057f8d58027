from __future__ import annotations

from typing import Iterable, Mapping

from ..common.datetime_utils import working_days_in_month
from ..core.enums import AttendanceStatus

_LEAVE_STATUSES = {AttendanceStatus.LEAVE_APPROVED.value, AttendanceStatus.WFH_APPROVED.value}


def summarize_month(entries: Iterable[Mapping], *, year: int, month: int) -> dict:
    """Monthly attendance figures for one employee.

    ``entries`` are serialised attendance rows (``status`` and ``totalHours``
    keys). Working days exclude Sundays; a half day counts as 0.5 towards
    the attendance percentage. LATE days are also counted as present.
    """
    working_days = working_days_in_month(year, month)
    present = absent = half = late = leave = 0
    total_hours = 0.0

    for entry in entries:
        status = entry.get("status")
        if status in (AttendanceStatus.PRESENT.value, AttendanceStatus.LATE.value):
            present += 1
        if status == AttendanceStatus.LATE.value:
            late += 1
        elif status == AttendanceStatus.ABSENT.value:
            absent += 1
        elif status == AttendanceStatus.HALF_DAY.value:
            half += 1
        elif status in _LEAVE_STATUSES:
            leave += 1
        total_hours += float(entry.get("totalHours") or 0)

    average = total_hours / present if present else 0.0
    percentage = (present + 0.5 * half) / working_days * 100 if working_days else 0.0

    return {
        "year": year,
        "month": month,
        "workingDays": working_days,
        "presentDays": present,
        "absentDays": absent,
        "halfDays": half,
        "lateDays": late,
        "leaveDays": leave,
        "totalHours": round(total_hours, 1),
        "averageHours": round(average, 1),
        "attendancePercentage": round(percentage, 1),
    }
