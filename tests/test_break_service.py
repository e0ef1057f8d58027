from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from employee_tracker.breaks.model import Break
from employee_tracker.breaks.service import BreakService
from employee_tracker.core.exceptions import ConflictError, NotFoundError
from employee_tracker.employees.model import Employee


@dataclass
class InMemoryEmployees:
    by_id: dict[int, Employee]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(employee_id)


@dataclass
class InMemoryBreaks:
    items: list[Break] = field(default_factory=list)

    def get_active(self, employee_id: int) -> Optional[Break]:
        return next((b for b in self.items if b.employee_id == employee_id and b.is_active), None)

    def list_for_day(self, *, employee_id: int, break_date: date):
        found = [b for b in self.items if b.employee_id == employee_id and b.break_date == break_date]
        return sorted(found, key=lambda b: b.break_in_time)

    def save(self, item: Break) -> Break:
        if item not in self.items:
            item.id = len(self.items) + 1
            self.items.append(item)
        return item


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock(monkeypatch):
    c = Clock(datetime(2025, 1, 15, 11, 0, 0))
    monkeypatch.setattr("employee_tracker.breaks.service.now_local", c)
    return c


def _service(breaks=None, warning_minutes=30):
    employees = InMemoryEmployees({1: Employee(id=1, name="A", email="a@x.com", employee_code="EMP001")})
    return BreakService(breaks or InMemoryBreaks(), employees, warning_minutes=warning_minutes)


def test_break_in_twice_conflicts(clock):
    svc = _service()
    svc.start_break(employee_id=1)

    with pytest.raises(ConflictError):
        svc.start_break(employee_id=1)


def test_break_in_for_unknown_employee(clock):
    with pytest.raises(NotFoundError):
        _service().start_break(employee_id=2)


def test_break_out_without_open_break(clock):
    with pytest.raises(NotFoundError):
        _service().end_break(employee_id=1)


def test_short_break_is_not_flagged(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 20, 29)

    item = svc.end_break(employee_id=1)

    assert item.break_duration == 20
    assert item.is_active is False
    assert item.warning_sent is False


def test_long_break_sets_warning(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 31, 0)

    item = svc.end_break(employee_id=1)

    assert item.break_duration == 31
    assert item.warning_sent is True


def test_exactly_at_limit_is_not_flagged(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 30, 0)

    assert svc.end_break(employee_id=1).warning_sent is False


def test_status_reports_elapsed_and_limit(clock):
    svc = _service(warning_minutes=15)
    assert svc.status(employee_id=1)["isOnBreak"] is False

    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 16, 0)
    status = svc.status(employee_id=1)

    assert status["isOnBreak"] is True
    assert status["elapsedMinutes"] == 16
    assert status["exceedsLimit"] is True


def test_summary_counts_minutes_of_closed_breaks_only(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 10, 0)
    svc.end_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 15, 0, 0)
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 15, 20, 0)
    svc.end_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 17, 0, 0)
    svc.start_break(employee_id=1)

    summary = svc.summary(employee_id=1, break_date=date(2025, 1, 15))

    assert summary == {"totalBreaks": 3, "totalMinutes": 30, "avgMinutes": 10}
    assert [b.break_in_time.hour for b in svc.history(employee_id=1, break_date=date(2025, 1, 15))] == [11, 15, 17]


def test_half_minutes_round_up(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 2, 30)

    assert svc.end_break(employee_id=1).break_duration == 3


def test_summary_average_rounds_half_up(clock):
    svc = _service()
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 11, 2, 0)
    svc.end_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 12, 0, 0)
    svc.start_break(employee_id=1)
    clock.now = datetime(2025, 1, 15, 12, 3, 0)
    svc.end_break(employee_id=1)

    summary = svc.summary(employee_id=1, break_date=date(2025, 1, 15))

    assert summary == {"totalBreaks": 2, "totalMinutes": 5, "avgMinutes": 3}
