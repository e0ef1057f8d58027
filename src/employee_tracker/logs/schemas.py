from __future__ import annotations

from datetime import date

from pydantic import Field

from ..common.schemas import CamelModel


class LogEntry(CamelModel):
    tag_id: int
    count: int


class SubmitLogsRequest(CamelModel):
    employee_id: int
    log_date: date
    logs: list[LogEntry] = Field(min_length=1)
