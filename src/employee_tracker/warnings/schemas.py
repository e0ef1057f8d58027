from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel
from ..core.enums import WarningType


class CreateWarningRequest(CamelModel):
    employee_id: int
    warning_type: WarningType = WarningType.OTHER
    warning_message: str = Field(min_length=1)


class UpdateWarningRequest(CamelModel):
    non_nullable = ("warning_type", "warning_message", "is_active")

    warning_type: Optional[WarningType] = None
    warning_message: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None
