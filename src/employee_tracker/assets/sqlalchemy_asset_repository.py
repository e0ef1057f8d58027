from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Optional, Sequence

from sqlalchemy import func, or_, select

from ..core.enums import AssetStatus, AssignmentStatus
from ..database.extensions import db
from ..database.session import session_scope
from ..employees.model import Employee
from .model import Asset, AssetAssignment
from .repository import AssetFilters, AssignmentHistoryFilters


def _like(value: str) -> str:
    return f"%{value.lower()}%"


class SQLAlchemyAssetRepository:
    def get_by_id(self, asset_id: int) -> Optional[Asset]:
        return db.session.get(Asset, asset_id)

    def get_by_serial(self, serial_number: str) -> Optional[Asset]:
        return Asset.query.filter(Asset.serial_number == serial_number).first()

    def search(self, filters: AssetFilters, *, page: int, limit: int) -> tuple[Sequence[Asset], int]:
        q = Asset.query
        if filters.search:
            like = _like(filters.search)
            q = q.filter(
                or_(
                    func.lower(Asset.asset_name).like(like),
                    func.lower(Asset.serial_number).like(like),
                    func.lower(Asset.model).like(like),
                    func.lower(Asset.brand).like(like),
                )
            )
        if filters.status:
            q = q.filter(Asset.status == filters.status)
        if filters.asset_type:
            q = q.filter(Asset.asset_type == filters.asset_type)
        if filters.employee_name or filters.employee_code:
            holders = (
                select(AssetAssignment.asset_id)
                .join(Employee, AssetAssignment.employee_id == Employee.id)
                .where(AssetAssignment.status == AssignmentStatus.ACTIVE.value)
            )
            if filters.employee_name:
                holders = holders.where(func.lower(Employee.name).like(_like(filters.employee_name)))
            if filters.employee_code:
                holders = holders.where(func.lower(Employee.employee_code).like(_like(filters.employee_code)))
            q = q.filter(Asset.id.in_(holders))
        if filters.date_from:
            q = q.filter(Asset.created_at >= datetime.combine(filters.date_from, time.min))
        if filters.date_to:
            q = q.filter(Asset.created_at < datetime.combine(filters.date_to, time.min) + timedelta(days=1))

        total = q.count()
        items = q.order_by(Asset.created_at.desc(), Asset.id.desc()).offset((page - 1) * limit).limit(limit).all()
        return items, total

    def add(self, asset: Asset) -> Asset:
        with session_scope() as session:
            session.add(asset)
        return asset

    def save(self, asset: Asset) -> Asset:
        with session_scope() as session:
            session.add(asset)
        return asset

    def delete(self, asset: Asset) -> None:
        with session_scope() as session:
            session.delete(asset)

    def get_assignment(self, assignment_id: int) -> Optional[AssetAssignment]:
        return db.session.get(AssetAssignment, assignment_id)

    def get_active_assignment(self, asset_id: int) -> Optional[AssetAssignment]:
        return AssetAssignment.query.filter_by(asset_id=asset_id, status=AssignmentStatus.ACTIVE.value).first()

    def create_assignment(self, asset: Asset, assignment: AssetAssignment) -> AssetAssignment:
        # Assignment row and asset status change commit together
        with session_scope() as session:
            session.add(assignment)
            asset.status = AssetStatus.ASSIGNED.value
            session.add(asset)
        return assignment

    def close_assignment(self, asset: Asset, assignment: AssetAssignment) -> AssetAssignment:
        with session_scope() as session:
            session.add(assignment)
            asset.status = AssetStatus.AVAILABLE.value
            session.add(asset)
        return assignment

    def assignment_history(
        self, filters: AssignmentHistoryFilters, *, page: int, limit: int
    ) -> tuple[Sequence[AssetAssignment], int]:
        q = (
            AssetAssignment.query.join(Asset, AssetAssignment.asset_id == Asset.id)
            .join(Employee, AssetAssignment.employee_id == Employee.id)
        )
        if filters.asset_id:
            q = q.filter(AssetAssignment.asset_id == filters.asset_id)
        if filters.employee_id:
            q = q.filter(AssetAssignment.employee_id == filters.employee_id)
        if filters.employee_name:
            q = q.filter(func.lower(Employee.name).like(_like(filters.employee_name)))
        if filters.employee_code:
            q = q.filter(func.lower(Employee.employee_code).like(_like(filters.employee_code)))
        if filters.asset_name:
            q = q.filter(func.lower(Asset.asset_name).like(_like(filters.asset_name)))
        if filters.asset_type:
            q = q.filter(Asset.asset_type == filters.asset_type)
        if filters.status:
            q = q.filter(AssetAssignment.status == filters.status)
        if filters.date_from:
            q = q.filter(AssetAssignment.assigned_date >= datetime.combine(filters.date_from, time.min))
        if filters.date_to:
            q = q.filter(
                AssetAssignment.assigned_date < datetime.combine(filters.date_to, time.min) + timedelta(days=1)
            )

        total = q.count()
        items = (
            q.order_by(AssetAssignment.assigned_date.desc(), AssetAssignment.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return items, total

    def active_assignments_for_employee(self, employee_id: int) -> Sequence[AssetAssignment]:
        return (
            AssetAssignment.query.filter_by(employee_id=employee_id, status=AssignmentStatus.ACTIVE.value)
            .order_by(AssetAssignment.assigned_date.desc())
            .all()
        )
