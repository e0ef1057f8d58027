from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.session import session_scope
from .model import Break


class SQLAlchemyBreakRepository:
    def get_active(self, employee_id: int) -> Optional[Break]:
        return (
            Break.query.filter_by(employee_id=employee_id, is_active=True)
            .order_by(Break.break_in_time.desc())
            .first()
        )

    def list_for_day(self, *, employee_id: int, break_date: date) -> Sequence[Break]:
        return (
            Break.query.filter_by(employee_id=employee_id, break_date=break_date)
            .order_by(Break.break_in_time.asc())
            .all()
        )

    def save(self, item: Break) -> Break:
        with session_scope() as session:
            session.add(item)
        return item
