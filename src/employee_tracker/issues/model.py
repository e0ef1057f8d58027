from __future__ import annotations

from ..common.datetime_utils import iso
from ..core.enums import IssueStatus
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Issue(TimestampMixin, db.Model):
    """A problem raised by an employee and answered by an admin."""

    __tablename__ = "issues"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    issue_category = db.Column(db.String(80), nullable=False)
    issue_description = db.Column(db.Text, nullable=False)
    issue_status = db.Column(db.String(20), nullable=False, default=IssueStatus.PENDING.value, index=True)
    raised_date = db.Column(db.DateTime, nullable=False)
    resolved_date = db.Column(db.DateTime)
    admin_response = db.Column(db.Text)
    days_elapsed = db.Column(db.Integer, nullable=False, default=0)

    employee = db.relationship("Employee")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "issueCategory": self.issue_category,
            "issueDescription": self.issue_description,
            "issueStatus": self.issue_status,
            "raisedDate": iso(self.raised_date),
            "resolvedDate": iso(self.resolved_date),
            "adminResponse": self.admin_response,
            "daysElapsed": self.days_elapsed,
        }
