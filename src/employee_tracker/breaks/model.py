from __future__ import annotations

from ..common.datetime_utils import iso
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Break(TimestampMixin, db.Model):
    __tablename__ = "breaks"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    break_date = db.Column(db.Date, nullable=False, index=True)
    break_in_time = db.Column(db.DateTime, nullable=False)
    break_out_time = db.Column(db.DateTime)
    # minutes, set when the break is closed
    break_duration = db.Column(db.Integer)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    warning_sent = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "breakDate": iso(self.break_date),
            "breakInTime": iso(self.break_in_time),
            "breakOutTime": iso(self.break_out_time),
            "breakDuration": self.break_duration,
            "isActive": self.is_active,
            "warningSent": self.warning_sent,
        }
