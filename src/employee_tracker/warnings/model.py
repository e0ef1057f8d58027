from __future__ import annotations

from ..common.datetime_utils import iso
from ..core.enums import WarningType
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class EmployeeWarning(TimestampMixin, db.Model):
    """Admin-issued warning. Dismissal deactivates it; the row is kept."""

    __tablename__ = "warnings"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    warning_type = db.Column(db.String(20), nullable=False, default=WarningType.OTHER.value)
    warning_message = db.Column(db.Text, nullable=False)
    warning_date = db.Column(db.DateTime, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    employee = db.relationship("Employee")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "warningType": self.warning_type,
            "warningMessage": self.warning_message,
            "warningDate": iso(self.warning_date),
            "isActive": self.is_active,
        }
