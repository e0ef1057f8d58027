from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..assignments.model import Tag
from ..database.session import session_scope
from .model import Log, SubmissionStatus


class SQLAlchemyLogRepository:
    def list_for_day(self, *, employee_id: int, log_date: date) -> Sequence[Log]:
        return (
            Log.query.join(Tag, Log.tag_id == Tag.id)
            .filter(Log.employee_id == employee_id, Log.log_date == log_date)
            .order_by(Tag.tag_name.asc())
            .all()
        )

    def list_range(
        self, *, employee_id: Optional[int], date_from: Optional[date], date_to: Optional[date]
    ) -> Sequence[Log]:
        q = Log.query.join(Tag, Log.tag_id == Tag.id)
        if employee_id:
            q = q.filter(Log.employee_id == employee_id)
        if date_from:
            q = q.filter(Log.log_date >= date_from)
        if date_to:
            q = q.filter(Log.log_date <= date_to)
        return q.order_by(Log.log_date.asc(), Tag.tag_name.asc()).all()

    def get_submission(self, *, employee_id: int, submission_date: date) -> Optional[SubmissionStatus]:
        return SubmissionStatus.query.filter_by(employee_id=employee_id, submission_date=submission_date).first()

    def replace_day(
        self, *, employee_id: int, log_date: date, logs: Sequence[Log], submission: SubmissionStatus
    ) -> Sequence[Log]:
        with session_scope() as session:
            Log.query.filter_by(employee_id=employee_id, log_date=log_date).delete(synchronize_session=False)
            session.add_all(logs)
            session.add(submission)
        return logs
