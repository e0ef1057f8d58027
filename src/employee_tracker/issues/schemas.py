from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import CamelModel
from ..core.enums import IssueStatus


class CreateIssueRequest(CamelModel):
    employee_id: int
    issue_category: str = Field(min_length=1, max_length=80)
    issue_description: str = Field(min_length=1)


class UpdateIssueRequest(CamelModel):
    non_nullable = ("issue_status",)

    issue_status: Optional[IssueStatus] = None
    admin_response: Optional[str] = None
