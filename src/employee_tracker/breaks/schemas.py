from __future__ import annotations

from ..common.schemas import CamelModel


class BreakRequest(CamelModel):
    employee_id: int
