from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeWarning


class WarningRepository(Protocol):
    def get_by_id(self, warning_id: int) -> Optional[EmployeeWarning]: ...

    def list_all(self, *, employee_id: Optional[int] = None, is_active: Optional[bool] = None) -> Sequence[EmployeeWarning]: ...

    def save(self, warning: EmployeeWarning) -> EmployeeWarning: ...

    def delete(self, warning: EmployeeWarning) -> None: ...
