from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import ceil_days, iso, now_local
from ..core.enums import AssetCondition, AssetStatus, AssignmentStatus
from ..database.extensions import db
from ..database.mixins import TimestampMixin


class Asset(TimestampMixin, db.Model):
    __tablename__ = "assets"

    id = db.Column(db.Integer, primary_key=True)
    asset_name = db.Column(db.String(160), nullable=False)
    asset_type = db.Column(db.String(40), nullable=False, index=True)
    serial_number = db.Column(db.String(120), unique=True)
    model = db.Column(db.String(120))
    brand = db.Column(db.String(120))
    purchase_date = db.Column(db.Date)
    condition = db.Column(db.String(20), nullable=False, default=AssetCondition.GOOD.value)
    status = db.Column(db.String(20), nullable=False, default=AssetStatus.AVAILABLE.value, index=True)
    description = db.Column(db.Text)
    notes = db.Column(db.Text)

    assignments = db.relationship(
        "AssetAssignment",
        back_populates="asset",
        order_by="AssetAssignment.assigned_date.desc()",
        cascade="all, delete-orphan",
    )

    @property
    def active_assignment(self) -> Optional["AssetAssignment"]:
        return next((a for a in self.assignments if a.status == AssignmentStatus.ACTIVE.value), None)

    def to_dict(self) -> dict:
        active = self.active_assignment
        return {
            "id": self.id,
            "assetName": self.asset_name,
            "assetType": self.asset_type,
            "serialNumber": self.serial_number,
            "model": self.model,
            "brand": self.brand,
            "purchaseDate": iso(self.purchase_date),
            "condition": self.condition,
            "status": self.status,
            "description": self.description,
            "notes": self.notes,
            "activeAssignment": active.to_dict(include_asset=False) if active else None,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }


class AssetAssignment(TimestampMixin, db.Model):
    """An asset handed to an employee; at most one ACTIVE row per asset."""

    __tablename__ = "asset_assignments"

    id = db.Column(db.Integer, primary_key=True)
    asset_id = db.Column(db.Integer, db.ForeignKey("assets.id", ondelete="CASCADE"), nullable=False, index=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    assigned_date = db.Column(db.DateTime, nullable=False, default=datetime.now)
    assigned_by = db.Column(db.String(120))
    assignment_notes = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default=AssignmentStatus.ACTIVE.value, index=True)
    return_date = db.Column(db.DateTime)
    return_condition = db.Column(db.String(20))
    return_notes = db.Column(db.Text)
    returned_by = db.Column(db.String(120))

    asset = db.relationship("Asset", back_populates="assignments")
    employee = db.relationship("Employee", backref="asset_assignments")

    @property
    def is_active(self) -> bool:
        return self.status == AssignmentStatus.ACTIVE.value

    @property
    def duration_days(self) -> int:
        return ceil_days(self.assigned_date, self.return_date or now_local())

    def to_dict(self, *, include_asset: bool = True) -> dict:
        data = {
            "id": self.id,
            "assetId": self.asset_id,
            "employeeId": self.employee_id,
            "employee": self.employee.to_brief() if self.employee else None,
            "assignedDate": iso(self.assigned_date),
            "assignedBy": self.assigned_by,
            "assignmentNotes": self.assignment_notes,
            "status": self.status,
            "returnDate": iso(self.return_date),
            "returnCondition": self.return_condition,
            "returnNotes": self.return_notes,
            "returnedBy": self.returned_by,
            "duration": self.duration_days,
            "isActive": self.is_active,
        }
        if include_asset and self.asset is not None:
            data["asset"] = {
                "id": self.asset.id,
                "assetName": self.asset.asset_name,
                "assetType": self.asset.asset_type,
                "serialNumber": self.asset.serial_number,
                "condition": self.asset.condition,
                "status": self.asset.status,
            }
        return data
