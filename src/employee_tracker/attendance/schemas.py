from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel
from ..core.enums import AttendanceExceptionType, AttendanceStatus, ImportSource


class CreateAttendanceRequest(CamelModel):
    employee_id: int
    work_date: date = Field(alias="date")
    status: AttendanceStatus
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    lunch_out_time: Optional[str] = None
    lunch_in_time: Optional[str] = None
    break_out_time: Optional[str] = None
    break_in_time: Optional[str] = None
    total_hours: Optional[float] = Field(default=None, ge=0, le=24)
    tag_work_minutes: int = Field(default=0, ge=0)
    flowace_minutes: int = Field(default=0, ge=0)
    has_exception: bool = False
    exception_type: Optional[AttendanceExceptionType] = None
    exception_notes: Optional[str] = None
    import_source: str = ImportSource.MANUAL.value
    import_batch: Optional[str] = None
    remarks: Optional[str] = None


class UpdateAttendanceRequest(CamelModel):
    non_nullable = ("work_date", "status", "tag_work_minutes", "flowace_minutes", "has_exception")

    work_date: Optional[date] = Field(default=None, alias="date")
    status: Optional[AttendanceStatus] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    lunch_out_time: Optional[str] = None
    lunch_in_time: Optional[str] = None
    break_out_time: Optional[str] = None
    break_in_time: Optional[str] = None
    total_hours: Optional[float] = Field(default=None, ge=0, le=24)
    tag_work_minutes: Optional[int] = Field(default=None, ge=0)
    flowace_minutes: Optional[int] = Field(default=None, ge=0)
    has_exception: Optional[bool] = None
    exception_type: Optional[AttendanceExceptionType] = None
    exception_notes: Optional[str] = None
    remarks: Optional[str] = None
