from dataclasses import dataclass

from employee_tracker.flowace.reconciliation import EXACT, FIRST_NAME, PARTIAL, SPECIAL, match_employee


@dataclass
class Person:
    id: int
    name: str


STAFF = [
    Person(1, "Narayan"),
    Person(2, "Priya Sharma"),
    Person(3, "Rahul Verma"),
    Person(4, "Rahul"),
]


def test_exact_match_wins_over_partial():
    employee, reason = match_employee("rahul", STAFF)

    assert employee.id == 4
    assert reason == EXACT


def test_partial_match_either_direction():
    employee, reason = match_employee("Priya", STAFF)
    assert (employee.id, reason) == (2, PARTIAL)

    employee, reason = match_employee("Priya Sharma K", STAFF)
    assert (employee.id, reason) == (2, PARTIAL)


def test_first_name_match():
    employee, reason = match_employee("Priy Sharmaa", [Person(2, "Priya Sharma")])

    assert (employee.id, reason) == (2, FIRST_NAME)


def test_special_mapping_is_last_resort():
    employee, reason = match_employee("Naryan Yadav", STAFF)

    assert (employee.id, reason) == (1, SPECIAL)


def test_no_match():
    assert match_employee("Zed", STAFF) is None
    assert match_employee("   ", STAFF) is None
