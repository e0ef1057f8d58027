from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, or_

from ..database.extensions import db
from ..database.session import session_scope
from .model import Employee


class SQLAlchemyEmployeeRepository:
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return db.session.get(Employee, employee_id)

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        code = (employee_code or "").strip().upper()
        return Employee.query.filter(func.upper(Employee.employee_code) == code).first()

    def get_by_email(self, email: str) -> Optional[Employee]:
        return Employee.query.filter(func.lower(Employee.email) == (email or "").strip().lower()).first()

    def list_all(self, *, search: Optional[str] = None, is_active: Optional[bool] = None) -> Sequence[Employee]:
        q = Employee.query
        if search:
            like = f"%{search.lower()}%"
            q = q.filter(
                or_(
                    func.lower(Employee.name).like(like),
                    func.lower(Employee.employee_code).like(like),
                    func.lower(Employee.email).like(like),
                )
            )
        if is_active is not None:
            q = q.filter(Employee.is_active.is_(is_active))
        return q.order_by(Employee.name.asc()).all()

    def list_by_codes(self, codes: Sequence[str]) -> Sequence[Employee]:
        if not codes:
            return []
        upper = [c.upper() for c in codes]
        return Employee.query.filter(func.upper(Employee.employee_code).in_(upper)).all()

    def add(self, employee: Employee) -> Employee:
        with session_scope() as session:
            session.add(employee)
        return employee

    def save(self, employee: Employee) -> Employee:
        with session_scope() as session:
            session.add(employee)
        return employee
