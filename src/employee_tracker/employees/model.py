from __future__ import annotations

from ..common.datetime_utils import iso
from ..core.enums import EmployeeRole
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Employee(TimestampMixin, db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, index=True)
    email = db.Column(db.String(180), nullable=False, unique=True)
    employee_code = db.Column(db.String(40), nullable=False, unique=True)
    role = db.Column(db.String(20), nullable=False, default=EmployeeRole.EMPLOYEE.value)
    department = db.Column(db.String(120))
    designation = db.Column(db.String(120))
    join_date = db.Column(db.Date)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    def to_brief(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "employeeCode": self.employee_code,
            "email": self.email,
            "department": self.department,
        }

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "employeeCode": self.employee_code,
            "role": self.role,
            "department": self.department,
            "designation": self.designation,
            "joinDate": iso(self.join_date),
            "isActive": self.is_active,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
