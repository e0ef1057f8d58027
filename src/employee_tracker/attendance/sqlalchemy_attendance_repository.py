from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from sqlalchemy import func, or_

from ..database.extensions import db
from ..database.session import session_scope
from ..employees.model import Employee
from ..uploads.model import UploadHistory
from .model import Attendance, AttendanceRecord
from .repository import AttendanceFilters


class SQLAlchemyAttendanceRepository:
    def get_record(self, record_id: int) -> Optional[AttendanceRecord]:
        return db.session.get(AttendanceRecord, record_id)

    def get_legacy(self, attendance_id: int) -> Optional[Attendance]:
        return db.session.get(Attendance, attendance_id)

    def get_for_employee_and_date(self, *, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return AttendanceRecord.query.filter_by(employee_id=employee_id, date=work_date).first()

    def list_records(self, filters: AttendanceFilters) -> Sequence[AttendanceRecord]:
        q = AttendanceRecord.query.join(Employee, AttendanceRecord.employee_id == Employee.id)
        if filters.start_date:
            q = q.filter(AttendanceRecord.date >= filters.start_date)
        if filters.end_date:
            q = q.filter(AttendanceRecord.date <= filters.end_date)
        if filters.status:
            q = q.filter(AttendanceRecord.status == filters.status)
        if filters.employee_id:
            q = q.filter(AttendanceRecord.employee_id == filters.employee_id)
        if filters.search:
            like = f"%{filters.search.lower()}%"
            q = q.filter(
                or_(
                    func.lower(Employee.name).like(like),
                    func.lower(Employee.employee_code).like(like),
                    func.lower(Employee.department).like(like),
                )
            )
        return q.order_by(AttendanceRecord.date.desc(), Employee.name.asc()).all()

    def list_for_employee(
        self, *, employee_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> Sequence[AttendanceRecord]:
        q = AttendanceRecord.query.filter(AttendanceRecord.employee_id == employee_id)
        if start_date:
            q = q.filter(AttendanceRecord.date >= start_date)
        if end_date:
            q = q.filter(AttendanceRecord.date <= end_date)
        return q.order_by(AttendanceRecord.date.desc()).all()

    def list_legacy_for_employee(
        self, *, employee_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> Sequence[Attendance]:
        q = Attendance.query.filter(Attendance.employee_id == employee_id)
        if start_date:
            q = q.filter(Attendance.date >= start_date)
        if end_date:
            q = q.filter(Attendance.date <= end_date)
        return q.order_by(Attendance.date.desc()).all()

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        with session_scope() as session:
            session.add(record)
        return record

    def save(self, record: Any) -> Any:
        with session_scope() as session:
            session.add(record)
        return record

    def delete(self, record: Any) -> None:
        with session_scope() as session:
            session.delete(record)

    def upsert_many(self, rows: Sequence[dict], *, batch_size: int, new_employees: Sequence[Employee] = ()) -> int:
        """Insert or update rows keyed on (employee_id, date) in a single transaction.

        ``new_employees`` are inserted first in the same transaction; rows may
        reference any employee through an ``employee`` key instead of ``employee_id``.
        """
        written = 0
        with session_scope() as session:
            if new_employees:
                session.add_all(new_employees)
                session.flush()
            rows = [_resolve_employee(row) for row in rows]
            for start in range(0, len(rows), batch_size):
                written += self._upsert_chunk(session, rows[start:start + batch_size])
                session.flush()
        return written

    def _upsert_chunk(self, session, chunk: Sequence[dict]) -> int:
        employee_ids = {r["employee_id"] for r in chunk}
        dates = {r["date"] for r in chunk}
        existing = {
            (rec.employee_id, rec.date): rec
            for rec in AttendanceRecord.query.filter(
                AttendanceRecord.employee_id.in_(employee_ids),
                AttendanceRecord.date.in_(dates),
            )
        }
        for row in chunk:
            record = existing.get((row["employee_id"], row["date"]))
            if record is None:
                record = AttendanceRecord(**row)
                session.add(record)
                existing[(row["employee_id"], row["date"])] = record
            else:
                for key, value in row.items():
                    setattr(record, key, value)
        return len(chunk)

    def delete_batch(self, *, batch_id: str, history: Optional[UploadHistory]) -> int:
        with session_scope() as session:
            deleted = AttendanceRecord.query.filter_by(import_batch=batch_id).delete(synchronize_session=False)
            if history is not None:
                session.delete(history)
        return deleted


def _resolve_employee(row: dict) -> dict:
    if "employee" not in row:
        return row
    row = dict(row)
    row["employee_id"] = row.pop("employee").id
    return row
