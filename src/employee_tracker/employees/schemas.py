from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel
from ..core.enums import EmployeeRole


class CreateEmployeeRequest(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    employee_code: str = Field(min_length=1)
    role: EmployeeRole = EmployeeRole.EMPLOYEE
    department: Optional[str] = None
    designation: Optional[str] = None
    join_date: Optional[date] = None


class UpdateEmployeeRequest(CamelModel):
    non_nullable = ("name", "email", "employee_code", "role", "is_active")

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    employee_code: Optional[str] = Field(default=None, min_length=1)
    role: Optional[EmployeeRole] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    join_date: Optional[date] = None
    is_active: Optional[bool] = None
