from __future__ import annotations

from ..common.datetime_utils import iso
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Log(TimestampMixin, db.Model):
    """Items of one tag an employee completed on a given day."""

    __tablename__ = "logs"
    __table_args__ = (db.UniqueConstraint("employee_id", "tag_id", "log_date", name="uq_log_employee_tag_date"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)
    count = db.Column(db.Integer, nullable=False, default=0)
    total_minutes = db.Column(db.Integer, nullable=False, default=0)
    log_date = db.Column(db.Date, nullable=False, index=True)

    tag = db.relationship("Tag")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "tagId": self.tag_id,
            "tag": self.tag.to_dict() if self.tag else None,
            "count": self.count,
            "totalMinutes": self.total_minutes,
            "logDate": iso(self.log_date),
        }


class SubmissionStatus(TimestampMixin, db.Model):
    __tablename__ = "submission_status"
    __table_args__ = (
        db.UniqueConstraint("employee_id", "submission_date", name="uq_submission_employee_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    submission_date = db.Column(db.Date, nullable=False)
    submission_time = db.Column(db.DateTime, nullable=False)
    is_locked = db.Column(db.Boolean, nullable=False, default=True)
    total_minutes = db.Column(db.Integer, nullable=False, default=0)
    status_message = db.Column(db.String(255))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "submissionDate": iso(self.submission_date),
            "submissionTime": iso(self.submission_time),
            "isLocked": self.is_locked,
            "totalMinutes": self.total_minutes,
            "statusMessage": self.status_message,
        }
