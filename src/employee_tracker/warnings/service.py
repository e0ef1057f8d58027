from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.logging import get_logger
from ..core.enums import WarningType
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import EmployeeWarning
from .repository import WarningRepository

logger = get_logger(__name__)


class WarningService:
    def __init__(self, warnings: WarningRepository, employees: EmployeeRepository):
        self._warnings = warnings
        self._employees = employees

    def list_warnings(self, *, employee_id: Optional[int] = None, is_active: Optional[bool] = None) -> Sequence[EmployeeWarning]:
        return self._warnings.list_all(employee_id=employee_id, is_active=is_active)

    def get_warning(self, warning_id: int) -> EmployeeWarning:
        warning = self._warnings.get_by_id(warning_id)
        if not warning:
            raise NotFoundError("Warning not found")
        return warning

    def issue_warning(self, *, employee_id: int, warning_type: WarningType, warning_message: str) -> EmployeeWarning:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        warning = EmployeeWarning(
            employee_id=employee_id,
            warning_type=WarningType(warning_type).value,
            warning_message=warning_message,
            warning_date=now_local(),
            is_active=True,
        )
        self._warnings.save(warning)
        logger.info("Warning %s issued to employee %s (%s)", warning.id, employee_id, warning.warning_type)
        return warning

    def update_warning(self, warning_id: int, *, changes: dict[str, Any]) -> EmployeeWarning:
        warning = self.get_warning(warning_id)
        if changes.get("warning_type") is not None:
            warning.warning_type = WarningType(changes["warning_type"]).value
        if changes.get("warning_message") is not None:
            warning.warning_message = changes["warning_message"]
        if changes.get("is_active") is not None:
            warning.is_active = changes["is_active"]
        return self._warnings.save(warning)

    def dismiss(self, warning_id: int) -> EmployeeWarning:
        """Deactivate the warning; it stays in the history."""
        warning = self.get_warning(warning_id)
        warning.is_active = False
        self._warnings.save(warning)
        logger.info("Warning %s dismissed", warning_id)
        return warning

    def delete_warning(self, warning_id: int) -> None:
        warning = self.get_warning(warning_id)
        self._warnings.delete(warning)
        logger.info("Warning %s deleted", warning_id)
