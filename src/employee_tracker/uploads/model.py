from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import iso
from ..core.enums import UploadStatus
from ..database.extensions import db


class _UploadColumns:
    id = db.Column(db.Integer, primary_key=True)
    filename = db.Column(db.String(255), nullable=False)
    batch_id = db.Column(db.String(64), nullable=False, unique=True, index=True)
    status = db.Column(db.String(32), nullable=False, default=UploadStatus.PROCESSING.value)
    total_records = db.Column(db.Integer, nullable=False, default=0)
    processed_records = db.Column(db.Integer, nullable=False, default=0)
    error_records = db.Column(db.Integer, nullable=False, default=0)
    uploaded_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    completed_at = db.Column(db.DateTime)
    errors = db.Column(db.JSON)
    summary = db.Column(db.JSON)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "filename": self.filename,
            "batchId": self.batch_id,
            "status": self.status,
            "totalRecords": self.total_records,
            "processedRecords": self.processed_records,
            "errorRecords": self.error_records,
            "uploadedAt": iso(self.uploaded_at),
            "completedAt": iso(self.completed_at),
            "errors": self.errors or [],
            "summary": self.summary or {},
        }


class UploadHistory(_UploadColumns, db.Model):
    """One attendance (CSV/SRP) upload batch."""

    __tablename__ = "upload_history"


class FlowaceUploadHistory(_UploadColumns, db.Model):
    __tablename__ = "flowace_upload_history"

    original_headers = db.Column(db.JSON)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["originalHeaders"] = self.original_headers or []
        return data
