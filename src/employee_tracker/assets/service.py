from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.logging import get_logger
from ..common.validators import optional_text, require_non_empty
from ..core.enums import AssetCondition, AssetStatus, AssignmentStatus
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Asset, AssetAssignment
from .repository import AssetFilters, AssetRepository, AssignmentHistoryFilters

logger = get_logger(__name__)


def _ignore_all(value: Optional[str]) -> Optional[str]:
    value = optional_text(value)
    return None if value is None or value.lower() == "all" else value


class AssetService:
    """Use case: asset inventory and hand-over to employees."""

    def __init__(self, assets: AssetRepository, employees: EmployeeRepository):
        self._assets = assets
        self._employees = employees

    def search_assets(
        self,
        *,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[str] = None,
        asset_type: Optional[str] = None,
        employee_name: Optional[str] = None,
        employee_code: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> tuple[Sequence[Asset], int]:
        filters = AssetFilters(
            search=optional_text(search),
            status=(_ignore_all(status) or "").upper() or None,
            asset_type=_ignore_all(asset_type),
            employee_name=optional_text(employee_name),
            employee_code=optional_text(employee_code),
            date_from=date_from,
            date_to=date_to,
        )
        return self._assets.search(filters, page=page, limit=limit)

    def get_asset(self, asset_id: int) -> Asset:
        asset = self._assets.get_by_id(asset_id)
        if not asset:
            raise NotFoundError("Asset not found")
        return asset

    def create_asset(
        self,
        *,
        asset_name: str,
        asset_type: str,
        serial_number: Optional[str] = None,
        model: Optional[str] = None,
        brand: Optional[str] = None,
        purchase_date: Optional[date] = None,
        description: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Asset:
        asset_name = require_non_empty(asset_name, "Asset name")
        asset_type = require_non_empty(asset_type, "Asset type")
        serial_number = optional_text(serial_number)
        if serial_number and self._assets.get_by_serial(serial_number):
            raise ConflictError("Serial number already exists")

        asset = Asset(
            asset_name=asset_name,
            asset_type=asset_type,
            serial_number=serial_number,
            model=optional_text(model),
            brand=optional_text(brand),
            purchase_date=purchase_date,
            condition=AssetCondition.GOOD.value,
            status=AssetStatus.AVAILABLE.value,
            description=optional_text(description),
            notes=optional_text(notes),
        )
        return self._assets.add(asset)

    def update_asset(self, asset_id: int, *, changes: dict) -> Asset:
        asset = self.get_asset(asset_id)

        if "serial_number" in changes:
            serial = optional_text(changes["serial_number"])
            if serial and serial != asset.serial_number:
                other = self._assets.get_by_serial(serial)
                if other and other.id != asset.id:
                    raise ConflictError("Serial number already exists")
            changes["serial_number"] = serial

        for key, value in changes.items():
            if key in ("asset_name", "asset_type") and value is not None:
                value = require_non_empty(value, key.replace("_", " ").capitalize())
            if hasattr(value, "value"):
                value = value.value
            setattr(asset, key, value)
        return self._assets.save(asset)

    def delete_asset(self, asset_id: int) -> None:
        asset = self.get_asset(asset_id)
        if self._assets.get_active_assignment(asset.id):
            raise ConflictError("Cannot delete an asset that is currently assigned")
        self._assets.delete(asset)

    def assign_asset(
        self,
        *,
        asset_id: int,
        employee_id: int,
        assigned_by: Optional[str] = None,
        assignment_notes: Optional[str] = None,
    ) -> AssetAssignment:
        asset = self.get_asset(asset_id)
        if asset.status != AssetStatus.AVAILABLE.value or self._assets.get_active_assignment(asset.id):
            raise ConflictError("Asset is already assigned to someone")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        assignment = AssetAssignment(
            asset_id=asset.id,
            employee_id=employee.id,
            assigned_date=now_local(),
            assigned_by=optional_text(assigned_by),
            assignment_notes=optional_text(assignment_notes),
            status=AssignmentStatus.ACTIVE.value,
        )
        assignment = self._assets.create_assignment(asset, assignment)
        logger.info("Asset %s assigned to employee %s", asset.id, employee.id)
        return assignment

    def return_asset(
        self,
        *,
        assignment_id: int,
        return_condition: Optional[AssetCondition] = None,
        return_notes: Optional[str] = None,
        returned_by: Optional[str] = None,
    ) -> AssetAssignment:
        assignment = self._assets.get_assignment(assignment_id)
        if not assignment:
            raise NotFoundError("Assignment not found")
        if assignment.status != AssignmentStatus.ACTIVE.value:
            raise ConflictError("Assignment is not active")

        asset = self.get_asset(assignment.asset_id)
        assignment.status = AssignmentStatus.RETURNED.value
        assignment.return_date = now_local()
        assignment.return_notes = optional_text(return_notes)
        assignment.returned_by = optional_text(returned_by)
        if return_condition is not None:
            assignment.return_condition = AssetCondition(return_condition).value
            asset.condition = assignment.return_condition

        assignment = self._assets.close_assignment(asset, assignment)
        logger.info("Asset %s returned from employee %s", asset.id, assignment.employee_id)
        return assignment

    def assignment_history(self, *, page: int, limit: int, **filters) -> tuple[Sequence[AssetAssignment], int]:
        status = _ignore_all(filters.pop("status", None))
        asset_type = _ignore_all(filters.pop("asset_type", None))
        cleaned = {k: optional_text(v) if isinstance(v, str) else v for k, v in filters.items()}
        return self._assets.assignment_history(
            AssignmentHistoryFilters(
                status=status.upper() if status else None,
                asset_type=asset_type,
                **cleaned,
            ),
            page=page,
            limit=limit,
        )

    def employee_assets(self, employee_id: int) -> Sequence[AssetAssignment]:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        return self._assets.active_assignments_for_employee(employee_id)
