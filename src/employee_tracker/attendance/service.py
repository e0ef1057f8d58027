from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence, Union

from ..common.datetime_utils import combine_time, hours_between, month_bounds
from ..common.logging import get_logger
from ..common.validators import optional_text
from ..core.constants import LEGACY_ATTENDANCE_PREFIX
from ..core.enums import AttendanceStatus, ImportSource
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Attendance, AttendanceRecord
from .repository import AttendanceFilters, AttendanceRepository
from .summary import summarize_month

logger = get_logger(__name__)

_TIME_FIELDS = (
    "check_in_time",
    "check_out_time",
    "lunch_out_time",
    "lunch_in_time",
    "break_out_time",
    "break_in_time",
)


def parse_record_id(raw: str) -> tuple[bool, int]:
    """Split a public record id into ``(is_legacy, numeric_id)``.

    Legacy rows are exposed as ``att_<id>``.
    """
    raw = (raw or "").strip()
    is_legacy = raw.startswith(LEGACY_ATTENDANCE_PREFIX)
    digits = raw[len(LEGACY_ATTENDANCE_PREFIX):] if is_legacy else raw
    if not digits.isdigit():
        raise ValidationError("Invalid record ID")
    return is_legacy, int(digits)


def merge_employee_attendance(
    records: Sequence[AttendanceRecord],
    legacy: Sequence[Attendance],
    *,
    with_seconds: bool = False,
) -> tuple[list[dict], dict]:
    """Combine both attendance tables, newest first.

    When both tables hold a row for the same day, the AttendanceRecord row
    wins.
    """
    merged: dict[tuple[int, date], dict] = {}
    for row in records:
        merged[(row.employee_id, row.date)] = row.to_dict(with_seconds=with_seconds)

    from_legacy = 0
    for row in legacy:
        key = (row.employee_id, row.date)
        if key in merged:
            continue
        merged[key] = row.to_dict(with_seconds=with_seconds)
        from_legacy += 1

    items = sorted(merged.values(), key=lambda r: r["date"], reverse=True)
    meta = {
        "total": len(items),
        "fromAttendanceRecord": len(items) - from_legacy,
        "fromAttendance": from_legacy,
    }
    return items, meta


class AttendanceService:
    """Use case: browse and edit daily attendance."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def list_attendance(
        self,
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        start = end = None
        if month and year:
            start, end = month_bounds(year, month)
        if status and status.upper() == "ALL":
            status = None
        filters = AttendanceFilters(
            start_date=start,
            end_date=end,
            status=status.upper() if status else None,
            search=optional_text(search),
            employee_id=employee_id,
        )
        return self._attendance.list_records(filters)

    def create_record(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        total_hours: Optional[float] = None,
        tag_work_minutes: int = 0,
        flowace_minutes: int = 0,
        has_exception: bool = False,
        exception_type: Optional[str] = None,
        exception_notes: Optional[str] = None,
        import_source: str = ImportSource.MANUAL.value,
        import_batch: Optional[str] = None,
        remarks: Optional[str] = None,
        **times: Any,
    ) -> AttendanceRecord:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if self._attendance.get_for_employee_and_date(employee_id=employee_id, work_date=work_date):
            raise ConflictError("Attendance record already exists for this employee and date")

        record = AttendanceRecord(
            employee_id=employee_id,
            date=work_date,
            status=AttendanceStatus(status).value,
            tag_work_minutes=tag_work_minutes,
            flowace_minutes=flowace_minutes,
            has_exception=has_exception,
            exception_type=exception_type.value if hasattr(exception_type, "value") else exception_type,
            exception_notes=optional_text(exception_notes),
            import_source=import_source or ImportSource.MANUAL.value,
            import_batch=import_batch,
            remarks=optional_text(remarks),
        )
        self._apply_times(record, times)
        record.total_hours = total_hours if total_hours is not None else hours_between(
            record.check_in_time, record.check_out_time
        )
        return self._attendance.add(record)

    def update_record(self, raw_id: str, *, changes: dict) -> Union[AttendanceRecord, Attendance]:
        record = self._get_any(raw_id)

        new_date = changes.pop("work_date", None)
        if new_date and new_date != record.date:
            if isinstance(record, AttendanceRecord) and self._attendance.get_for_employee_and_date(
                employee_id=record.employee_id, work_date=new_date
            ):
                raise ConflictError("Attendance record already exists for this employee and date")
            record.date = new_date

        times = {k: changes.pop(k) for k in list(changes) if k in _TIME_FIELDS}
        if isinstance(record, Attendance):
            times = {k: v for k, v in times.items() if k in ("check_in_time", "check_out_time")}
        self._apply_times(record, times)

        if "status" in changes and changes["status"] is not None:
            record.status = AttendanceStatus(changes.pop("status")).value
        for key, value in changes.items():
            if hasattr(value, "value"):
                value = value.value
            if hasattr(record, key) and key not in ("id", "employee_id"):
                setattr(record, key, value)

        if "total_hours" not in changes and times:
            record.total_hours = hours_between(record.check_in_time, record.check_out_time)
        return self._attendance.save(record)

    def delete_record(self, raw_id: str) -> None:
        record = self._get_any(raw_id)
        self._attendance.delete(record)

    def employee_attendance(
        self, employee_id: int, *, month: Optional[int] = None, year: Optional[int] = None, with_seconds: bool = False
    ) -> tuple[list[dict], dict]:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        start = end = None
        if month and year:
            start, end = month_bounds(year, month)
        records = self._attendance.list_for_employee(employee_id=employee_id, start_date=start, end_date=end)
        legacy = self._attendance.list_legacy_for_employee(employee_id=employee_id, start_date=start, end_date=end)
        return merge_employee_attendance(records, legacy, with_seconds=with_seconds)

    def monthly_summary(self, employee_id: int, *, month: int, year: int) -> dict:
        entries, _ = self.employee_attendance(employee_id, month=month, year=year)
        summary = summarize_month(entries, year=year, month=month)
        summary["employeeId"] = employee_id
        return summary

    def calendar(self, employee_id: int, *, month: int, year: int) -> list[dict]:
        entries, _ = self.employee_attendance(employee_id, month=month, year=year, with_seconds=True)
        return [
            {
                "id": e["id"],
                "date": e["date"],
                "status": e["status"],
                "checkIn": e["checkInTime"],
                "checkOut": e["checkOutTime"],
                "totalHours": e["totalHours"],
            }
            for e in sorted(entries, key=lambda e: e["date"])
        ]

    def _get_any(self, raw_id: str) -> Union[AttendanceRecord, Attendance]:
        is_legacy, numeric_id = parse_record_id(raw_id)
        record = self._attendance.get_legacy(numeric_id) if is_legacy else self._attendance.get_record(numeric_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    @staticmethod
    def _apply_times(record, times: dict) -> None:
        for key, value in times.items():
            if key not in _TIME_FIELDS:
                raise ValidationError(f"Unknown field {key}")
            try:
                setattr(record, key, combine_time(record.date, value))
            except ValueError:
                raise ValidationError(f"Invalid time for {key}: {value!r}") from None
