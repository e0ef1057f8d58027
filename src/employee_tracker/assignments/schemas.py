from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel


class TagRequest(CamelModel):
    tag_name: str = Field(min_length=1)
    time_minutes: int = Field(ge=0)


class UpdateTagRequest(CamelModel):
    non_nullable = ("tag_name", "time_minutes")

    tag_name: Optional[str] = Field(default=None, min_length=1)
    time_minutes: Optional[int] = Field(default=None, ge=0)


class CreateAssignmentRequest(CamelModel):
    employee_id: int
    tag_id: int
    is_mandatory: bool = False


class UpdateAssignmentRequest(CamelModel):
    is_mandatory: bool


class BulkAssignmentRequest(CamelModel):
    employee_id: int
    tag_ids: list[int] = Field(min_length=1)
    is_mandatory: bool = False
