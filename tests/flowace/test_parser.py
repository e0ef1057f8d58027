from datetime import date

import pytest

from employee_tracker.core.enums import PerformanceCategory
from employee_tracker.core.exceptions import ValidationError
from employee_tracker.flowace.parser import find_header_row, parse_flowace_csv
from employee_tracker.flowace.performance import performance_category

EXPORT = """Flowace Productivity Report
Generated on 2025-01-16

Member Name,Member Id,Member Email,Teams,Date,Logged Hours,Active Hours,Productive Hours,Productivity %,Classified Billable Duration
John Doe,EMP001,john@company.com,Dev,15-01-2025,8.5,7.25,6.0,82%,3600
Jane Smith,-,,Ops,,"1,200.5",2,1,40.5%,0
,EMP009,,,,1,1,1,10%,0
"""


def test_header_row_is_found_after_title_lines():
    assert find_header_row(EXPORT.splitlines()) == 3
    assert find_header_row(["a,b", "c,d"]) == -1


def test_rows_are_parsed_with_metrics_and_defaults():
    result = parse_flowace_csv(EXPORT, default_date=date(2025, 1, 20))

    assert result.total == 3
    assert result.headers[0] == "Member Name"
    john, jane = result.rows

    assert john.employee_code == "EMP001"
    assert john.date == date(2025, 1, 15)
    assert john.metrics["logged_hours"] == 8.5
    assert john.metrics["productivity_percentage"] == 82.0
    assert john.metrics["classified_billable_duration"] == 3600
    # absent columns default to zero
    assert john.metrics["idle_hours"] == 0.0

    # "-" member id falls back to the name; missing date falls back to the default
    assert jane.employee_code == "Jane Smith"
    assert jane.date == date(2025, 1, 20)
    assert jane.metrics["logged_hours"] == 1200.5
    assert jane.member_email is None


def test_row_without_member_name_is_an_error():
    result = parse_flowace_csv(EXPORT, default_date=date(2025, 1, 20))

    assert len(result.errors) == 1
    assert result.errors[0].startswith("Row 7:")


def test_missing_header_row_is_rejected_with_preview():
    with pytest.raises(ValidationError) as exc:
        parse_flowace_csv("Report\nName,Hours\nJohn,8\n", default_date=date(2025, 1, 1))

    assert exc.value.details["foundLines"][:2] == ["Report", "Name,Hours"]


def test_empty_file_is_rejected():
    with pytest.raises(ValidationError, match="empty"):
        parse_flowace_csv("\n  \n", default_date=date(2025, 1, 1))


@pytest.mark.parametrize(
    "hours, productivity, expected",
    [
        (3.9, 99, PerformanceCategory.LOW_HOURS),
        (8, 81, PerformanceCategory.EXCELLENT),
        (8, 80, PerformanceCategory.GOOD),
        (6, 61, PerformanceCategory.GOOD),
        (6, 60, PerformanceCategory.AVERAGE),
        (5, 41, PerformanceCategory.AVERAGE),
        (5, 40, PerformanceCategory.NEEDS_IMPROVEMENT),
        (None, None, PerformanceCategory.LOW_HOURS),
    ],
)
def test_performance_category_thresholds(hours, productivity, expected):
    assert performance_category(hours, productivity) == expected


def test_trailing_comma_does_not_shift_columns():
    result = parse_flowace_csv(
        "Member Name,Member Id,Member Email,Date\nAlice Smith,EMP001,a@x.com,2025-01-15,\n",
        default_date=date(2025, 1, 1),
    )

    assert result.errors == []
    (row,) = result.rows
    assert (row.employee_name, row.employee_code, row.member_email, row.date) == (
        "Alice Smith",
        "EMP001",
        "a@x.com",
        date(2025, 1, 15),
    )


def test_rows_with_extra_values_are_rejected():
    with pytest.raises(ValidationError, match="Unable to read CSV file"):
        parse_flowace_csv("Member Name,Member Id,Email\nA,B,C,D,E,F\n", default_date=date(2025, 1, 1))


@pytest.mark.parametrize("member_id", ["", "-"])
def test_blank_member_id_falls_back_to_name(member_id):
    result = parse_flowace_csv(
        f"Member Name,Member Id,Logged Hours\nAlice Smith,{member_id},4\n",
        default_date=date(2025, 1, 1),
    )

    assert result.rows[0].employee_code == "Alice Smith"
    assert result.rows[0].metrics["logged_hours"] == 4.0


def test_short_rows_read_missing_columns_as_blank():
    result = parse_flowace_csv("Member Name,Member Id,Teams\nAlice Smith\n", default_date=date(2025, 1, 1))

    (row,) = result.rows
    assert row.employee_code == "Alice Smith"
    assert row.teams is None
