from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import optional_text, require_non_empty
from ..core.constants import (
    AUTO_CREATED_EMPLOYEE_DEPARTMENT,
    AUTO_CREATED_EMPLOYEE_DESIGNATION,
    AUTO_CREATED_EMPLOYEE_DOMAIN,
)
from ..core.enums import EmployeeRole
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeService:
    """Use case: manage the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, search: Optional[str] = None, is_active: Optional[bool] = None) -> Sequence[Employee]:
        return self._employees.list_all(search=optional_text(search), is_active=is_active)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_active_by_code(self, code: str) -> Employee:
        employee = self._employees.get_by_code(require_non_empty(code, "Employee code"))
        if not employee:
            raise NotFoundError("Employee not found")
        if not employee.is_active:
            raise AuthorizationError("Employee account is inactive")
        return employee

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        employee_code: str,
        role: EmployeeRole = EmployeeRole.EMPLOYEE,
        department: Optional[str] = None,
        designation: Optional[str] = None,
        join_date: Optional[date] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email").lower()
        employee_code = require_non_empty(employee_code, "Employee code").upper()

        self._ensure_unique(email=email, employee_code=employee_code)

        employee = Employee(
            name=name,
            email=email,
            employee_code=employee_code,
            role=EmployeeRole(role).value,
            department=optional_text(department),
            designation=optional_text(designation),
            join_date=join_date,
            is_active=True,
        )
        return self._employees.add(employee)

    def update_employee(self, employee_id: int, *, changes: dict) -> Employee:
        employee = self.get_employee(employee_id)

        email = changes.get("email")
        code = changes.get("employee_code")
        if email is not None:
            changes["email"] = email = require_non_empty(email, "Email").lower()
        if code is not None:
            changes["employee_code"] = code = require_non_empty(code, "Employee code").upper()
        self._ensure_unique(email=email, employee_code=code, exclude_id=employee.id)

        for field in ("name", "email", "employee_code", "department", "designation", "join_date", "is_active"):
            if field in changes:
                setattr(employee, field, changes[field])
        if changes.get("role") is not None:
            employee.role = EmployeeRole(changes["role"]).value
        return self._employees.save(employee)

    def ensure_for_import(self, *, employee_code: str, name: Optional[str]) -> tuple[Employee, bool]:
        """Find an employee by code, or build a placeholder for an unknown code.

        Returns the employee and whether it is new. New employees are not
        persisted here; the import writes them with its attendance rows.
        """
        code = require_non_empty(employee_code, "Employee code").upper()
        existing = self._employees.get_by_code(code)
        if existing:
            return existing, False

        employee = Employee(
            name=optional_text(name) or code,
            email=self._free_import_email(code),
            employee_code=code,
            role=EmployeeRole.EMPLOYEE.value,
            department=AUTO_CREATED_EMPLOYEE_DEPARTMENT,
            designation=AUTO_CREATED_EMPLOYEE_DESIGNATION,
            is_active=True,
        )
        logger.info("Auto-creating employee %s (%s) from import", code, employee.name)
        return employee, True

    def _free_import_email(self, code: str) -> str:
        email = f"{code.lower()}@{AUTO_CREATED_EMPLOYEE_DOMAIN}"
        n = 1
        while self._employees.get_by_email(email):
            n += 1
            email = f"{code.lower()}.{n}@{AUTO_CREATED_EMPLOYEE_DOMAIN}"
        return email

    def _ensure_unique(self, *, email: Optional[str], employee_code: Optional[str], exclude_id: Optional[int] = None) -> None:
        if email:
            other = self._employees.get_by_email(email)
            if other and other.id != exclude_id:
                raise ConflictError("An employee with this email already exists")
        if employee_code:
            other = self._employees.get_by_code(employee_code)
            if other and other.id != exclude_id:
                raise ConflictError("An employee with this employee code already exists")
