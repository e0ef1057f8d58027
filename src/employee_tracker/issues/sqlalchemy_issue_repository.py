from __future__ import annotations

from typing import Optional, Sequence

from ..database.extensions import db
from ..database.session import session_scope
from .model import Issue


class SQLAlchemyIssueRepository:
    def get_by_id(self, issue_id: int) -> Optional[Issue]:
        return db.session.get(Issue, issue_id)

    def list_all(self, *, employee_id: Optional[int] = None, status: Optional[str] = None) -> Sequence[Issue]:
        q = Issue.query
        if employee_id:
            q = q.filter(Issue.employee_id == employee_id)
        if status:
            q = q.filter(Issue.issue_status == status)
        return q.order_by(Issue.raised_date.desc(), Issue.id.desc()).all()

    def save(self, issue: Issue) -> Issue:
        with session_scope() as session:
            session.add(issue)
        return issue
