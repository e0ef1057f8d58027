from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import days_elapsed, now_local
from ..common.logging import get_logger
from ..core.enums import IssueStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Issue
from .repository import IssueRepository

logger = get_logger(__name__)


class IssueService:
    def __init__(self, issues: IssueRepository, employees: EmployeeRepository):
        self._issues = issues
        self._employees = employees

    def list_issues(self, *, employee_id: Optional[int] = None, status: Optional[str] = None) -> Sequence[Issue]:
        if status and status not in {s.value for s in IssueStatus}:
            raise ValidationError(f"Invalid status: {status}")
        return self._issues.list_all(employee_id=employee_id, status=status)

    def get_issue(self, issue_id: int) -> Issue:
        issue = self._issues.get_by_id(issue_id)
        if not issue:
            raise NotFoundError("Issue not found")
        return issue

    def raise_issue(self, *, employee_id: int, issue_category: str, issue_description: str) -> Issue:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        issue = Issue(
            employee_id=employee_id,
            issue_category=issue_category,
            issue_description=issue_description,
            issue_status=IssueStatus.PENDING.value,
            raised_date=now_local(),
            days_elapsed=0,
        )
        self._issues.save(issue)
        logger.info("Issue %s raised by employee %s (%s)", issue.id, employee_id, issue_category)
        return issue

    def update_issue(self, issue_id: int, *, changes: dict[str, Any]) -> Issue:
        """Apply status/response changes; resolvedDate follows the status."""
        issue = self.get_issue(issue_id)
        now = now_local()

        status = changes.get("issue_status")
        if status is not None:
            status = IssueStatus(status)
            if status == IssueStatus.RESOLVED and issue.issue_status != IssueStatus.RESOLVED.value:
                issue.resolved_date = now
            elif status != IssueStatus.RESOLVED:
                issue.resolved_date = None
            issue.issue_status = status.value
        if "admin_response" in changes:
            issue.admin_response = changes["admin_response"]

        issue.days_elapsed = days_elapsed(issue.raised_date, issue.resolved_date or now)
        self._issues.save(issue)
        logger.info("Issue %s updated: status=%s", issue.id, issue.issue_status)
        return issue
