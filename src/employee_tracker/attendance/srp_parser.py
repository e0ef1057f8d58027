"""Parser for SRP attendance exports.

An SRP file is a whitespace-aligned report from the biometric terminal: a
few header lines (company, report title, report date) followed by one line
per employee, e.g.::

    1   EMP001  1234  John Doe  S1  09:00  09:05  13:00  14:00  18:10  8.50  P

Columns drift between terminal firmware versions, so tokens are located by
shape rather than by position.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import minutes_between, parse_clock, today_local
from ..core.constants import LUNCH_GAP_MINUTES
from ..core.enums import AttendanceStatus

_DATA_START = re.compile(r"^\s*\d+\s+[A-Za-z]+\d+")
_HEADER_DATE = re.compile(r"(\d{1,2})[-/](\d{1,2})[-/](\d{4})")
_EMPLOYEE_CODE = re.compile(r"^[A-Za-z]+\d+$")
_SHIFT = re.compile(r"^S\d+$", re.IGNORECASE)
_CLOCK = re.compile(r"^\d{1,2}:\d{2}$")
_HOURS = re.compile(r"^\d+\.\d{2}$")

_STATUS_TOKENS = {
    "P": AttendanceStatus.PRESENT,
    "PRESENT": AttendanceStatus.PRESENT,
    "MIS": AttendanceStatus.PRESENT,
    "A": AttendanceStatus.ABSENT,
    "ABSENT": AttendanceStatus.ABSENT,
}

NO_DATA_ERROR = "No attendance data found in file"


@dataclass(frozen=True)
class SrpRecord:
    serial_no: str
    employee_code: str
    card_number: str
    employee_name: str
    date: date
    status: AttendanceStatus
    shift: str
    shift_start: Optional[str]
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    lunch_out_time: Optional[time] = None
    lunch_in_time: Optional[time] = None
    break_out_time: Optional[time] = None
    break_in_time: Optional[time] = None
    hours_worked: Optional[float] = None
    line_no: int = 0


@dataclass
class SrpParseResult:
    date: date
    records: list[SrpRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def _find_data_start(lines: list[str]) -> int:
    for i, line in enumerate(lines):
        if _DATA_START.match(line):
            return i
    return -1


def extract_header_date(header_lines: list[str]) -> Optional[date]:
    """First day-first ``D/M/YYYY`` (or ``D-M-YYYY``) date found in the header."""
    for line in header_lines:
        for m in _HEADER_DATE.finditer(line):
            day, month, year = (int(g) for g in m.groups())
            try:
                return date(year, month, day)
            except ValueError:
                continue
    return None


def _assign_times(times: list[time]) -> dict[str, Optional[time]]:
    slots: dict[str, Optional[time]] = {
        "check_in_time": None,
        "check_out_time": None,
        "lunch_out_time": None,
        "lunch_in_time": None,
        "break_out_time": None,
        "break_in_time": None,
    }
    n = len(times)
    if n == 0:
        return slots
    if n == 1:
        slots["check_in_time"] = times[0]
    elif n == 2:
        slots["check_in_time"], slots["check_out_time"] = times
    elif n == 3:
        slots["check_in_time"], slots["break_out_time"], slots["check_out_time"] = times
    elif n == 4:
        slots["check_in_time"], slots["check_out_time"] = times[0], times[3]
        if minutes_between(times[1], times[2]) > LUNCH_GAP_MINUTES:
            slots["lunch_out_time"], slots["lunch_in_time"] = times[1], times[2]
        else:
            slots["break_out_time"], slots["break_in_time"] = times[1], times[2]
    elif n == 6:
        (
            slots["check_in_time"],
            slots["break_out_time"],
            slots["break_in_time"],
            slots["lunch_out_time"],
            slots["lunch_in_time"],
            slots["check_out_time"],
        ) = times
    else:
        slots["check_in_time"], slots["check_out_time"] = times[0], times[-1]
    return slots


def parse_srp_line(line: str, *, record_date: date, line_no: int = 0) -> tuple[Optional[SrpRecord], Optional[str]]:
    """Parse one data line. Returns ``(record, None)`` or ``(None, reason)``."""
    parts = line.split()
    if len(parts) < 6:
        return None, f"Line {line_no}: too few columns"

    # parts[0] is the serial number
    code_idx = next((i for i in range(1, len(parts)) if _EMPLOYEE_CODE.match(parts[i])), -1)
    if code_idx < 0:
        return None, f"Line {line_no}: no employee code"

    card_idx = code_idx + 1
    shift_idx = next(
        (i for i in range(code_idx + 2, len(parts)) if _SHIFT.match(parts[i])),
        -1,
    )
    if shift_idx < 0:
        return None, f"Line {line_no}: no shift code"

    start_idx = shift_idx + 1
    shift_start = parts[start_idx] if start_idx < len(parts) else None

    status_idx = next(
        (i for i in range(start_idx + 1, len(parts)) if parts[i].upper() in _STATUS_TOKENS),
        -1,
    )
    end = status_idx if status_idx >= 0 else len(parts)

    times: list[time] = []
    hours: Optional[float] = None
    for token in parts[start_idx + 1:end]:
        if _CLOCK.match(token):
            clock = parse_clock(token)
            if clock is not None:
                times.append(clock)
        elif _HOURS.match(token):
            hours = float(token)

    if status_idx >= 0:
        status = _STATUS_TOKENS[parts[status_idx].upper()]
    elif not times and not hours:
        status = AttendanceStatus.ABSENT
    else:
        status = AttendanceStatus.PRESENT

    record = SrpRecord(
        serial_no=parts[0],
        employee_code=parts[code_idx].upper(),
        card_number=parts[card_idx] if card_idx < shift_idx else "",
        employee_name=" ".join(parts[card_idx + 1:shift_idx]),
        date=record_date,
        status=status,
        shift=parts[shift_idx].upper(),
        shift_start=shift_start,
        hours_worked=hours,
        line_no=line_no,
        **_assign_times(times),
    )
    return record, None


def parse_srp(content: str, selected_date: Optional[date] = None) -> SrpParseResult:
    lines = [line for line in content.splitlines() if line.strip()]
    start = _find_data_start(lines)
    if start < 0:
        return SrpParseResult(date=selected_date or today_local(), errors=[NO_DATA_ERROR])

    record_date = selected_date or extract_header_date(lines[:start]) or today_local()
    result = SrpParseResult(date=record_date)

    for offset, line in enumerate(lines[start:]):
        record, reason = parse_srp_line(line, record_date=record_date, line_no=start + offset + 1)
        if record is not None:
            result.records.append(record)
        elif reason:
            result.skipped.append(reason)
    return result
