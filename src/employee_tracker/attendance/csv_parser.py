from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pydantic
from pydantic import Field, field_validator

from ..common.files import read_csv_frame
from ..common.schemas import CamelModel
from ..core.constants import MAX_CSV_ROWS
from ..core.enums import AttendanceExceptionType, AttendanceStatus
from ..core.exceptions import ValidationError

REQUIRED_HEADERS = ("employeeCode", "date", "status")


class AttendanceCsvRow(CamelModel):
    employee_code: str
    work_date: date = Field(alias="date")
    status: Optional[AttendanceStatus] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    total_hours: Optional[float] = None
    tag_work_minutes: int = 0
    flowace_minutes: int = 0
    has_exception: bool = False
    exception_type: Optional[AttendanceExceptionType] = None
    exception_notes: Optional[str] = None

    @field_validator("work_date", mode="before")
    @classmethod
    def _day_first_dates(cls, value):
        if isinstance(value, str):
            value = value.strip()
            for fmt in ("%d/%m/%Y", "%d-%m-%Y"):
                try:
                    return datetime.strptime(value, fmt).date()
                except ValueError:
                    continue
            return value[:10]
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _upper_status(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@dataclass
class CsvParseResult:
    rows: list[tuple[int, AttendanceCsvRow]] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    total: int = 0


def _format_row_error(row_no: int, exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return f"Row {row_no}: " + "; ".join(parts)


def parse_attendance_csv(content: str) -> CsvParseResult:
    """Validate headers and rows of an attendance CSV.

    Raises ValidationError (with ``missingHeaders``/``foundHeaders`` details)
    when a required column is absent. Invalid rows become ``Row N: ...``
    errors; row numbers are 1-based and count the header line.
    """
    frame = read_csv_frame(content)

    found = list(frame.columns)
    missing = [h for h in REQUIRED_HEADERS if h not in found]
    if missing:
        raise ValidationError(
            "Missing required headers",
            details={"missingHeaders": missing, "foundHeaders": found},
        )
    if len(frame) > MAX_CSV_ROWS:
        raise ValidationError(f"CSV file exceeds the maximum of {MAX_CSV_ROWS} rows")

    result = CsvParseResult(total=len(frame))
    for i, raw in enumerate(frame.to_dict(orient="records")):
        row_no = i + 2
        values = {k: v.strip() for k, v in raw.items() if isinstance(v, str) and v.strip() != ""}
        try:
            result.rows.append((row_no, AttendanceCsvRow.model_validate(values)))
        except pydantic.ValidationError as e:
            result.errors.append(_format_row_error(row_no, e))
    return result
