from datetime import date, time

import pytest

from employee_tracker.attendance.srp_parser import NO_DATA_ERROR, extract_header_date, parse_srp, parse_srp_line
from employee_tracker.core.enums import AttendanceStatus

DAY = date(2025, 1, 15)

SAMPLE = """ACME PRIVATE LIMITED
Daily Performance Report
Report Date : 15/01/2025

1   EMP001  1234  John Doe    S1  09:00  09:05  13:00  14:00  18:10  8.50  P
2   EMP002  1235  Jane Smith  S1  09:00  A
3   ???
"""


def test_four_times_with_long_gap_is_lunch():
    rec, reason = parse_srp_line(
        "1   EMP001  1234  John Doe  S1  09:00  09:05  13:00  14:00  18:10  8.50  P",
        record_date=DAY,
    )

    assert reason is None
    assert rec.employee_code == "EMP001"
    assert rec.card_number == "1234"
    assert rec.employee_name == "John Doe"
    assert rec.shift == "S1"
    assert rec.shift_start == "09:00"
    assert rec.check_in_time == time(9, 5)
    assert rec.check_out_time == time(18, 10)
    assert rec.lunch_out_time == time(13, 0)
    assert rec.lunch_in_time == time(14, 0)
    assert rec.break_out_time is None
    assert rec.hours_worked == 8.5
    assert rec.status == AttendanceStatus.PRESENT


def test_four_times_with_short_gap_is_break():
    rec, _ = parse_srp_line("4  EMP004  99  Ann Lee  S2  10:00  10:02  12:00  12:30  19:00", record_date=DAY)

    assert rec.break_out_time == time(12, 0)
    assert rec.break_in_time == time(12, 30)
    assert rec.lunch_out_time is None
    # no status token but times present
    assert rec.status == AttendanceStatus.PRESENT


def test_gap_of_exactly_45_minutes_is_a_break():
    rec, _ = parse_srp_line("4  EMP004  99  Ann  S2  10:00  10:02  12:00  12:45  19:00", record_date=DAY)

    assert rec.break_out_time == time(12, 0)
    assert rec.lunch_out_time is None


def test_two_three_and_six_times():
    two, _ = parse_srp_line("1 EMP001 11 A B S1 09:00 09:01 18:00 P", record_date=DAY)
    assert (two.check_in_time, two.check_out_time) == (time(9, 1), time(18, 0))

    three, _ = parse_srp_line("1 EMP001 11 A B S1 09:00 09:01 11:00 18:00 P", record_date=DAY)
    assert three.check_in_time == time(9, 1)
    assert three.break_out_time == time(11, 0)
    assert three.check_out_time == time(18, 0)

    six, _ = parse_srp_line(
        "1 EMP001 11 A B S1 09:00 09:01 11:00 11:15 13:00 13:45 18:00 P",
        record_date=DAY,
    )
    assert six.check_in_time == time(9, 1)
    assert (six.break_out_time, six.break_in_time) == (time(11, 0), time(11, 15))
    assert (six.lunch_out_time, six.lunch_in_time) == (time(13, 0), time(13, 45))
    assert six.check_out_time == time(18, 0)


def test_five_times_uses_first_and_last():
    rec, _ = parse_srp_line("1 EMP001 11 A B S1 09:00 09:01 10:00 11:00 12:00 18:30 P", record_date=DAY)

    assert rec.check_in_time == time(9, 1)
    assert rec.check_out_time == time(18, 30)
    assert rec.lunch_out_time is None and rec.break_out_time is None


def test_no_times_and_no_status_is_absent():
    rec, _ = parse_srp_line("2  EMP002  1235  Jane Smith  S1  09:00", record_date=DAY)

    assert rec.status == AttendanceStatus.ABSENT
    assert rec.check_in_time is None


def test_line_without_shift_is_skipped_with_reason():
    rec, reason = parse_srp_line("7  EMP007  1  Someone  X  09:00  10:00", record_date=DAY, line_no=9)

    assert rec is None
    assert reason.startswith("Line 9:")


def test_header_date_is_day_first():
    assert extract_header_date(["Report Date : 03/02/2025"]) == date(2025, 2, 3)
    assert extract_header_date(["Printed 31-12-2024"]) == date(2024, 12, 31)
    assert extract_header_date(["no date here"]) is None


def test_parse_uses_header_date_and_collects_skipped_lines():
    result = parse_srp(SAMPLE)

    assert result.date == date(2025, 1, 15)
    assert [r.employee_code for r in result.records] == ["EMP001", "EMP002"]
    assert result.records[1].status == AttendanceStatus.ABSENT
    assert len(result.skipped) == 1
    assert result.errors == []


def test_selected_date_overrides_header():
    result = parse_srp(SAMPLE, date(2025, 3, 1))

    assert result.date == date(2025, 3, 1)
    assert all(r.date == date(2025, 3, 1) for r in result.records)


def test_file_without_data_lines_reports_no_data():
    result = parse_srp("ACME\nDaily Performance Report\n")

    assert result.records == []
    assert result.errors == [NO_DATA_ERROR]


@pytest.mark.parametrize(
    "punches, check_in, check_out",
    [
        ("09:01", time(9, 1), None),
        ("09:01 18:00", time(9, 1), time(18, 0)),
        ("09:01 11:00 18:00", time(9, 1), time(18, 0)),
        ("09:01 11:00 11:15 13:00 13:45 18:00", time(9, 1), time(18, 0)),
    ],
)
def test_check_in_and_out_by_punch_count(punches, check_in, check_out):
    rec, _ = parse_srp_line(f"1 EMP001 11 A B S1 09:00 {punches} P", record_date=DAY)

    assert (rec.check_in_time, rec.check_out_time) == (check_in, check_out)


def test_last_hours_token_wins():
    rec, _ = parse_srp_line("1 EMP001 11 A B S1 09:00 09:01 18:00 7.50 8.25 P", record_date=DAY)

    assert rec.hours_worked == 8.25


def test_serial_column_is_never_taken_as_employee_code():
    rec, _ = parse_srp_line("R1  EMP001  11  John Doe  S1  09:00  09:05  18:00  P", record_date=DAY)

    assert rec.serial_no == "R1"
    assert rec.employee_code == "EMP001"
    assert rec.card_number == "11"
