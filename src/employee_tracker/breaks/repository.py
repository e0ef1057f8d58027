from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Break


class BreakRepository(Protocol):
    def get_active(self, employee_id: int) -> Optional[Break]: ...

    def list_for_day(self, *, employee_id: int, break_date: date) -> Sequence[Break]: ...

    def save(self, item: Break) -> Break: ...
