from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Asset, AssetAssignment


@dataclass(frozen=True)
class AssetFilters:
    search: Optional[str] = None
    status: Optional[str] = None
    asset_type: Optional[str] = None
    employee_name: Optional[str] = None
    employee_code: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


@dataclass(frozen=True)
class AssignmentHistoryFilters:
    asset_id: Optional[int] = None
    employee_id: Optional[int] = None
    employee_name: Optional[str] = None
    employee_code: Optional[str] = None
    asset_name: Optional[str] = None
    asset_type: Optional[str] = None
    status: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class AssetRepository(Protocol):
    def get_by_id(self, asset_id: int) -> Optional[Asset]: ...

    def get_by_serial(self, serial_number: str) -> Optional[Asset]: ...

    def search(self, filters: AssetFilters, *, page: int, limit: int) -> tuple[Sequence[Asset], int]: ...

    def add(self, asset: Asset) -> Asset: ...

    def save(self, asset: Asset) -> Asset: ...

    def delete(self, asset: Asset) -> None: ...

    def get_assignment(self, assignment_id: int) -> Optional[AssetAssignment]: ...

    def get_active_assignment(self, asset_id: int) -> Optional[AssetAssignment]: ...

    def create_assignment(self, asset: Asset, assignment: AssetAssignment) -> AssetAssignment: ...

    def close_assignment(self, asset: Asset, assignment: AssetAssignment) -> AssetAssignment: ...

    def assignment_history(
        self, filters: AssignmentHistoryFilters, *, page: int, limit: int
    ) -> tuple[Sequence[AssetAssignment], int]: ...

    def active_assignments_for_employee(self, employee_id: int) -> Sequence[AssetAssignment]: ...
