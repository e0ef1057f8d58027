from __future__ import annotations

from ..common.datetime_utils import format_clock, iso
from ..core.constants import LEGACY_ATTENDANCE_PREFIX
from ..core.enums import ImportSource
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class AttendanceRecord(TimestampMixin, db.Model):
    """Imported or manually entered attendance, one per employee per day."""

    __tablename__ = "attendance_records"
    __table_args__ = (db.UniqueConstraint("employee_id", "date", name="uq_attendance_record_employee_date"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    status = db.Column(db.String(32), nullable=False)
    check_in_time = db.Column(db.DateTime)
    check_out_time = db.Column(db.DateTime)
    lunch_out_time = db.Column(db.DateTime)
    lunch_in_time = db.Column(db.DateTime)
    break_out_time = db.Column(db.DateTime)
    break_in_time = db.Column(db.DateTime)
    total_hours = db.Column(db.Float)
    tag_work_minutes = db.Column(db.Integer, nullable=False, default=0)
    flowace_minutes = db.Column(db.Integer, nullable=False, default=0)
    has_exception = db.Column(db.Boolean, nullable=False, default=False)
    exception_type = db.Column(db.String(48))
    exception_notes = db.Column(db.Text)
    import_source = db.Column(db.String(32), nullable=False, default=ImportSource.MANUAL.value)
    import_batch = db.Column(db.String(64), index=True)
    remarks = db.Column(db.Text)
    shift = db.Column(db.String(16))
    shift_start = db.Column(db.String(16))

    employee = db.relationship("Employee", backref=db.backref("attendance_records", passive_deletes=True))

    def to_dict(self, *, with_seconds: bool = False) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "date": iso(self.date),
            "status": self.status,
            "checkInTime": format_clock(self.check_in_time, with_seconds=with_seconds),
            "checkOutTime": format_clock(self.check_out_time, with_seconds=with_seconds),
            "lunchOutTime": format_clock(self.lunch_out_time, with_seconds=with_seconds),
            "lunchInTime": format_clock(self.lunch_in_time, with_seconds=with_seconds),
            "breakOutTime": format_clock(self.break_out_time, with_seconds=with_seconds),
            "breakInTime": format_clock(self.break_in_time, with_seconds=with_seconds),
            "totalHours": self.total_hours,
            "tagWorkMinutes": self.tag_work_minutes,
            "flowaceMinutes": self.flowace_minutes,
            "hasException": self.has_exception,
            "exceptionType": self.exception_type,
            "exceptionNotes": self.exception_notes,
            "importSource": self.import_source,
            "importBatch": self.import_batch,
            "remarks": self.remarks,
            "shift": self.shift,
            "shiftStart": self.shift_start,
            "source": "attendanceRecord",
        }


class Attendance(TimestampMixin, db.Model):
    """Legacy daily attendance table, read alongside AttendanceRecord."""

    __tablename__ = "attendance"
    __table_args__ = (db.UniqueConstraint("employee_id", "date", name="uq_attendance_employee_date"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    status = db.Column(db.String(32), nullable=False)
    check_in_time = db.Column(db.DateTime)
    check_out_time = db.Column(db.DateTime)
    total_hours = db.Column(db.Float)
    remarks = db.Column(db.Text)

    employee = db.relationship("Employee", backref=db.backref("legacy_attendance", passive_deletes=True))

    @property
    def public_id(self) -> str:
        return f"{LEGACY_ATTENDANCE_PREFIX}{self.id}"

    def to_dict(self, *, with_seconds: bool = False) -> dict:
        return {
            "id": self.public_id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "date": iso(self.date),
            "status": self.status,
            "checkInTime": format_clock(self.check_in_time, with_seconds=with_seconds),
            "checkOutTime": format_clock(self.check_out_time, with_seconds=with_seconds),
            "totalHours": self.total_hours,
            "remarks": self.remarks,
            "source": "attendance",
        }
