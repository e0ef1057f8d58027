"""Flowace productivity CSV export parser.

The export starts with a few report-title lines; the real header row is the
first line beginning ``Member Name,``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..common.files import read_csv_frame
from ..core.exceptions import ValidationError

_HEADER_ROW = re.compile(r"^Member Name,")

HOUR_COLUMNS = {
    "Logged Hours": "logged_hours",
    "Active Hours": "active_hours",
    "Idle Hours": "idle_hours",
    "Classified Hours": "classified_hours",
    "Unclassified Hours": "unclassified_hours",
    "Productive Hours": "productive_hours",
    "Unproductive Hours": "unproductive_hours",
    "Neutral Hours": "neutral_hours",
    "Available Hours": "available_hours",
    "Missing Hours": "missing_hours",
}

PERCENT_COLUMNS = {
    "Activity %": "activity_percentage",
    "Classified %": "classified_percentage",
    "Productivity %": "productivity_percentage",
}

DURATION_COLUMNS = {
    "Classified Billable Duration": "classified_billable_duration",
    "Classified Non Billable Duration": "classified_non_billable_duration",
}


@dataclass(frozen=True)
class FlowaceRow:
    row_no: int
    employee_name: str
    employee_code: str
    member_email: Optional[str]
    teams: Optional[str]
    date: date
    work_start_time: Optional[str]
    work_end_time: Optional[str]
    metrics: dict[str, Any]
    raw_data: list[str]


@dataclass
class FlowaceParseResult:
    headers: list[str] = field(default_factory=list)
    rows: list[FlowaceRow] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    total: int = 0


def _number(value: str) -> float:
    try:
        return float(value.replace(",", ""))
    except (AttributeError, ValueError):
        return 0.0


def _percent(value: str) -> Optional[float]:
    parsed = _number((value or "").replace("%", "").strip())
    return parsed or None


def _integer(value: str) -> int:
    return int(_number(value))


def _report_date(value: str, default: date) -> date:
    value = (value or "").strip()
    for fmt in ("%d-%m-%Y", "%d/%m/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return default


def find_header_row(lines: list[str]) -> int:
    for i, line in enumerate(lines):
        if _HEADER_ROW.match(line.strip()):
            return i
    return -1


def parse_flowace_csv(content: str, *, default_date: date) -> FlowaceParseResult:
    lines = content.splitlines()
    if not any(line.strip() for line in lines):
        raise ValidationError("CSV file is empty")

    header_idx = find_header_row(lines)
    if header_idx < 0:
        raise ValidationError(
            "Could not find the Flowace header row (expected a line starting with 'Member Name,')",
            details={"foundLines": [line for line in lines if line.strip()][:5]},
        )

    frame = read_csv_frame("\n".join(lines[header_idx:]))

    result = FlowaceParseResult(headers=list(frame.columns))
    for i, raw in enumerate(frame.to_dict(orient="records")):
        values = {k: v.strip() if isinstance(v, str) else "" for k, v in raw.items()}
        if not any(values.values()):
            continue
        result.total += 1
        row_no = i + header_idx + 2

        name = values.get("Member Name", "")
        if not name:
            result.errors.append(f"Row {row_no}: Missing member name")
            continue

        member_id = values.get("Member Id", "")
        metrics: dict[str, Any] = {}
        for column, attr in HOUR_COLUMNS.items():
            metrics[attr] = _number(values.get(column, ""))
        for column, attr in PERCENT_COLUMNS.items():
            metrics[attr] = _percent(values.get(column, ""))
        for column, attr in DURATION_COLUMNS.items():
            metrics[attr] = _integer(values.get(column, ""))

        result.rows.append(
            FlowaceRow(
                row_no=row_no,
                employee_name=name,
                employee_code=member_id if member_id and member_id != "-" else name,
                member_email=values.get("Member Email") or None,
                teams=values.get("Teams") or None,
                date=_report_date(values.get("Date", ""), default_date),
                work_start_time=values.get("Work Start Time") or None,
                work_end_time=values.get("Work End Time") or None,
                metrics=metrics,
                raw_data=[values.get(h, "") for h in result.headers],
            )
        )
    return result
