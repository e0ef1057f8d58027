from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel
from ..core.enums import AssetCondition, AssetStatus


class CreateAssetRequest(CamelModel):
    asset_name: str = Field(min_length=1)
    asset_type: str = Field(min_length=1)
    serial_number: Optional[str] = None
    model: Optional[str] = None
    brand: Optional[str] = None
    purchase_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class UpdateAssetRequest(CamelModel):
    non_nullable = ("asset_name", "asset_type", "condition", "status")

    asset_name: Optional[str] = Field(default=None, min_length=1)
    asset_type: Optional[str] = Field(default=None, min_length=1)
    serial_number: Optional[str] = None
    model: Optional[str] = None
    brand: Optional[str] = None
    purchase_date: Optional[date] = None
    condition: Optional[AssetCondition] = None
    status: Optional[AssetStatus] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class AssignAssetRequest(CamelModel):
    asset_id: int
    employee_id: int
    assigned_by: Optional[str] = None
    assignment_notes: Optional[str] = None


class ReturnAssetRequest(CamelModel):
    assignment_id: int
    return_condition: Optional[AssetCondition] = None
    return_notes: Optional[str] = None
    returned_by: Optional[str] = None
