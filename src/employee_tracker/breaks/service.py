from __future__ import annotations

import math
from datetime import date, datetime
from typing import Sequence

from ..common.datetime_utils import now_local
from ..common.logging import get_logger
from ..core.constants import DEFAULT_BREAK_WARNING_MINUTES
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Break
from .repository import BreakRepository

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _minutes(start: datetime, end: datetime) -> int:
    return round_half_up((end - start).total_seconds() / 60)


class BreakService:
    """Use case: employees start and end breaks; long breaks are flagged."""

    def __init__(
        self,
        breaks: BreakRepository,
        employees: EmployeeRepository,
        *,
        warning_minutes: int = DEFAULT_BREAK_WARNING_MINUTES,
    ):
        self._breaks = breaks
        self._employees = employees
        self._warning_minutes = warning_minutes

    def start_break(self, *, employee_id: int) -> Break:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if self._breaks.get_active(employee_id):
            raise ConflictError("Employee is already on a break")

        now = now_local()
        item = Break(
            employee_id=employee_id,
            break_date=now.date(),
            break_in_time=now,
            is_active=True,
            warning_sent=False,
        )
        self._breaks.save(item)
        logger.info("Employee %s started a break", employee_id)
        return item

    def end_break(self, *, employee_id: int) -> Break:
        item = self._breaks.get_active(employee_id)
        if not item:
            raise NotFoundError("No active break found")

        now = now_local()
        item.break_out_time = now
        item.break_duration = _minutes(item.break_in_time, now)
        item.is_active = False
        if item.break_duration > self._warning_minutes:
            item.warning_sent = True
            logger.warning(
                "Employee %s break lasted %d minutes (limit %d)",
                employee_id,
                item.break_duration,
                self._warning_minutes,
            )
        self._breaks.save(item)
        return item

    def status(self, *, employee_id: int) -> dict:
        item = self._breaks.get_active(employee_id)
        if not item:
            return {"isOnBreak": False, "activeBreak": None, "elapsedMinutes": 0, "exceedsLimit": False}
        elapsed = _minutes(item.break_in_time, now_local())
        return {
            "isOnBreak": True,
            "activeBreak": item.to_dict(),
            "elapsedMinutes": elapsed,
            "exceedsLimit": elapsed > self._warning_minutes,
        }

    def history(self, *, employee_id: int, break_date: date) -> Sequence[Break]:
        return self._breaks.list_for_day(employee_id=employee_id, break_date=break_date)

    def summary(self, *, employee_id: int, break_date: date) -> dict:
        items = self.history(employee_id=employee_id, break_date=break_date)
        closed = [b for b in items if b.break_out_time is not None]
        total = sum(_minutes(b.break_in_time, b.break_out_time) for b in closed)
        return {
            "totalBreaks": len(items),
            "totalMinutes": total,
            "avgMinutes": round_half_up(total / len(items)) if items else 0,
        }
