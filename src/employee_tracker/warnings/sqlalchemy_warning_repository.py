from __future__ import annotations

from typing import Optional, Sequence

from ..database.extensions import db
from ..database.session import session_scope
from .model import EmployeeWarning


class SQLAlchemyWarningRepository:
    def get_by_id(self, warning_id: int) -> Optional[EmployeeWarning]:
        return db.session.get(EmployeeWarning, warning_id)

    def list_all(self, *, employee_id: Optional[int] = None, is_active: Optional[bool] = None) -> Sequence[EmployeeWarning]:
        q = EmployeeWarning.query
        if employee_id:
            q = q.filter(EmployeeWarning.employee_id == employee_id)
        if is_active is not None:
            q = q.filter(EmployeeWarning.is_active.is_(is_active))
        return q.order_by(EmployeeWarning.warning_date.desc(), EmployeeWarning.id.desc()).all()

    def save(self, warning: EmployeeWarning) -> EmployeeWarning:
        with session_scope() as session:
            session.add(warning)
        return warning

    def delete(self, warning: EmployeeWarning) -> None:
        with session_scope() as session:
            session.delete(warning)
