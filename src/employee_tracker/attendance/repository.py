from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Protocol, Sequence

from ..employees.model import Employee
from ..uploads.model import UploadHistory
from .model import Attendance, AttendanceRecord


@dataclass(frozen=True)
class AttendanceFilters:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    search: Optional[str] = None
    employee_id: Optional[int] = None


class AttendanceRepository(Protocol):
    def get_record(self, record_id: int) -> Optional[AttendanceRecord]: ...

    def get_legacy(self, attendance_id: int) -> Optional[Attendance]: ...

    def get_for_employee_and_date(self, *, employee_id: int, work_date: date) -> Optional[AttendanceRecord]: ...

    def list_records(self, filters: AttendanceFilters) -> Sequence[AttendanceRecord]: ...

    def list_for_employee(
        self, *, employee_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> Sequence[AttendanceRecord]: ...

    def list_legacy_for_employee(
        self, *, employee_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> Sequence[Attendance]: ...

    def add(self, record: AttendanceRecord) -> AttendanceRecord: ...

    def save(self, record: Any) -> Any: ...

    def delete(self, record: Any) -> None: ...

    def upsert_many(self, rows: Sequence[dict], *, batch_size: int, new_employees: Sequence[Employee] = ()) -> int: ...

    def delete_batch(self, *, batch_id: str, history: Optional[UploadHistory]) -> int: ...
