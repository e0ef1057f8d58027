from employee_tracker.attendance.summary import summarize_month


def test_half_days_count_half_and_sundays_are_excluded():
    # January 2025 has 31 days and 4 Sundays
    entries = [{"status": "PRESENT", "totalHours": 8.0}] * 20 + [
        {"status": "HALF_DAY", "totalHours": 4.0},
        {"status": "HALF_DAY", "totalHours": 4.0},
        {"status": "ABSENT", "totalHours": None},
    ]

    summary = summarize_month(entries, year=2025, month=1)

    assert summary["workingDays"] == 27
    assert summary["presentDays"] == 20
    assert summary["halfDays"] == 2
    assert summary["absentDays"] == 1
    assert summary["totalHours"] == 168.0
    assert summary["averageHours"] == 8.4
    assert summary["attendancePercentage"] == round(21 / 27 * 100, 1)


def test_late_days_count_as_present():
    entries = [{"status": "LATE", "totalHours": 7.5}, {"status": "PRESENT", "totalHours": 8.5}]

    summary = summarize_month(entries, year=2025, month=2)

    assert summary["presentDays"] == 2
    assert summary["lateDays"] == 1
    assert summary["averageHours"] == 8.0


def test_empty_month():
    summary = summarize_month([], year=2025, month=2)

    assert summary["presentDays"] == 0
    assert summary["averageHours"] == 0.0
    assert summary["attendancePercentage"] == 0.0
