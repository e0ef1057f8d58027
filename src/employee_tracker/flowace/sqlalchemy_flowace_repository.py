from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, or_

from ..database.extensions import db
from ..database.session import session_scope
from ..uploads.model import FlowaceUploadHistory
from .model import FlowaceRecord
from .repository import FlowaceFilters


class SQLAlchemyFlowaceRepository:
    def get_by_id(self, record_id: int) -> Optional[FlowaceRecord]:
        return db.session.get(FlowaceRecord, record_id)

    def list_records(self, filters: FlowaceFilters) -> Sequence[FlowaceRecord]:
        q = FlowaceRecord.query
        if filters.start_date:
            q = q.filter(FlowaceRecord.date >= filters.start_date)
        if filters.end_date:
            q = q.filter(FlowaceRecord.date <= filters.end_date)
        if filters.employee_id:
            q = q.filter(FlowaceRecord.employee_id == filters.employee_id)
        if filters.search:
            like = f"%{filters.search.lower()}%"
            q = q.filter(
                or_(
                    func.lower(FlowaceRecord.employee_name).like(like),
                    func.lower(FlowaceRecord.employee_code).like(like),
                    func.lower(FlowaceRecord.member_email).like(like),
                    func.lower(FlowaceRecord.teams).like(like),
                )
            )
        return q.order_by(FlowaceRecord.date.desc(), FlowaceRecord.employee_name.asc()).all()

    def list_unlinked(self) -> Sequence[FlowaceRecord]:
        return FlowaceRecord.query.filter(FlowaceRecord.employee_id.is_(None)).order_by(FlowaceRecord.id).all()

    def save_batch(self, records: Sequence[FlowaceRecord], history: FlowaceUploadHistory) -> None:
        with session_scope() as session:
            session.add_all(records)
            session.add(history)

    def link_employees(self, links: Sequence[tuple[FlowaceRecord, int, str]]) -> int:
        with session_scope():
            for record, employee_id, employee_code in links:
                record.employee_id = employee_id
                record.employee_code = employee_code
        return len(links)

    def delete(self, record: FlowaceRecord) -> None:
        with session_scope() as session:
            session.delete(record)

    def delete_batch(self, *, batch_id: str, history: FlowaceUploadHistory) -> int:
        with session_scope() as session:
            deleted = FlowaceRecord.query.filter_by(batch_id=batch_id).delete(synchronize_session=False)
            session.delete(history)
        return deleted
