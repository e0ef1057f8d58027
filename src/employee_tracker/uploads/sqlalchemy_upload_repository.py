from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import UploadStatus
from ..database.extensions import db
from ..database.session import session_scope
from .model import FlowaceUploadHistory, UploadHistory


class SQLAlchemyUploadHistoryRepository:
    def start(self, *, filename: str, batch_id: str) -> UploadHistory:
        history = UploadHistory(filename=filename, batch_id=batch_id, status=UploadStatus.PROCESSING.value)
        with session_scope() as session:
            session.add(history)
        return history

    def finish(self, history: UploadHistory) -> UploadHistory:
        with session_scope() as session:
            session.add(history)
        return history

    def get_by_id(self, history_id: int) -> Optional[UploadHistory]:
        return db.session.get(UploadHistory, history_id)

    def get_by_batch(self, batch_id: str) -> Optional[UploadHistory]:
        return UploadHistory.query.filter_by(batch_id=batch_id).first()

    def list_recent(self, *, limit: int) -> Sequence[UploadHistory]:
        return UploadHistory.query.order_by(UploadHistory.uploaded_at.desc(), UploadHistory.id.desc()).limit(limit).all()

    def delete(self, history: UploadHistory) -> None:
        with session_scope() as session:
            session.delete(history)


class SQLAlchemyFlowaceUploadHistoryRepository:
    def add(self, history: FlowaceUploadHistory) -> FlowaceUploadHistory:
        with session_scope() as session:
            session.add(history)
        return history

    def get_by_batch(self, batch_id: str) -> Optional[FlowaceUploadHistory]:
        return FlowaceUploadHistory.query.filter_by(batch_id=batch_id).first()

    def list_all(self) -> Sequence[FlowaceUploadHistory]:
        return FlowaceUploadHistory.query.order_by(
            FlowaceUploadHistory.uploaded_at.desc(), FlowaceUploadHistory.id.desc()
        ).all()
