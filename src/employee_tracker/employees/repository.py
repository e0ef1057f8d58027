from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]: ...

    def get_by_code(self, employee_code: str) -> Optional[Employee]: ...

    def get_by_email(self, email: str) -> Optional[Employee]: ...

    def list_all(self, *, search: Optional[str] = None, is_active: Optional[bool] = None) -> Sequence[Employee]: ...

    def list_by_codes(self, codes: Sequence[str]) -> Sequence[Employee]: ...

    def add(self, employee: Employee) -> Employee: ...

    def save(self, employee: Employee) -> Employee: ...
