from datetime import date

import pytest

from employee_tracker.attendance.csv_parser import parse_attendance_csv
from employee_tracker.attendance.import_service import AttendanceImportService
from employee_tracker.attendance.model import AttendanceRecord
from employee_tracker.attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from employee_tracker.core.enums import UploadStatus
from employee_tracker.core.exceptions import ValidationError
from employee_tracker.database.extensions import db
from employee_tracker.employees.model import Employee
from employee_tracker.uploads.model import UploadHistory

CSV = """employeeCode,date,status,checkInTime,checkOutTime,totalHours
EMP001,2025-01-15,PRESENT,09:00,18:00,
EMP999,2025-01-15,PRESENT,,,
EMP001,not-a-date,PRESENT,,,
EMP002,16/01/2025,,09:30,17:30,
"""


def test_parser_reports_row_errors_with_line_numbers():
    result = parse_attendance_csv(CSV)

    assert result.total == 4
    assert [n for n, _ in result.rows] == [2, 3, 5]
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Row 4:")
    assert result.rows[2][1].work_date == date(2025, 1, 16)


def test_parser_rejects_missing_headers():
    with pytest.raises(ValidationError) as exc:
        parse_attendance_csv("employeeCode,checkInTime\nEMP001,09:00\n")

    assert exc.value.details["missingHeaders"] == ["date", "status"]
    assert exc.value.details["foundHeaders"] == ["employeeCode", "checkInTime"]


def test_import_upserts_and_records_history(container, make_employee):
    make_employee("John Doe", code="EMP001")
    make_employee("Jane Smith", code="EMP002")
    importer = container.attendance_import_service

    result = importer.import_file(filename="attendance.csv", content=CSV)

    assert result.total_records == 4
    assert result.processed_records == 2
    assert len(result.errors) == 2
    assert any("EMP999" in e for e in result.errors)

    history = UploadHistory.query.filter_by(batch_id=result.batch_id).one()
    assert history.status == UploadStatus.PARTIALLY_COMPLETED.value
    assert history.summary["successRate"] == 50.0

    jane = AttendanceRecord.query.filter_by(date=date(2025, 1, 16)).one()
    # status inferred from the punches
    assert jane.status == "PRESENT"
    assert jane.total_hours == 8.0

    # re-import updates in place
    importer.import_file(filename="again.csv", content=CSV.replace("09:00,18:00", "10:00,18:00"))
    assert AttendanceRecord.query.count() == 2
    john = AttendanceRecord.query.filter_by(date=date(2025, 1, 15)).one()
    assert john.check_in_time.hour == 10


def test_missing_headers_mark_history_failed(container):
    with pytest.raises(ValidationError):
        container.attendance_import_service.import_file(filename="bad.csv", content="foo,bar\n1,2\n")

    history = UploadHistory.query.one()
    assert history.status == UploadStatus.FAILED.value
    assert history.errors == ["Missing required headers"]


def test_srp_import_creates_unknown_employees(container, make_employee):
    make_employee("John Doe", code="EMP001")
    content = (
        "Daily Performance Report 15/01/2025\n"
        "1  EMP001  11  John Doe  S1  09:00  09:05  18:00  P\n"
        "2  EMP050  12  New Person  S1  09:00  09:10  17:00  P\n"
    )

    result = container.attendance_import_service.import_file(filename="day.srp", content=content)

    assert result.processed_records == 2
    assert any("EMP050" in w for w in result.warnings)
    rec = AttendanceRecord.query.join(AttendanceRecord.employee).filter_by(employee_code="EMP050").one()
    assert rec.import_source == "SRP_FILE"
    assert rec.date == date(2025, 1, 15)
    assert rec.shift == "S1"


def test_srp_without_data_fails(container):
    with pytest.raises(ValidationError):
        container.attendance_import_service.import_file(filename="empty.srp", content="Report header only\n")

    assert UploadHistory.query.one().status == UploadStatus.FAILED.value


def test_unsupported_extension_is_rejected(container):
    with pytest.raises(ValidationError):
        container.attendance_import_service.import_file(filename="data.xlsx", content="x")


def test_parser_ignores_trailing_comma_on_data_rows():
    result = parse_attendance_csv("employeeCode,date,status\nEMP001,2025-01-15,PRESENT,\n")

    assert result.errors == []
    row = result.rows[0][1]
    assert (row.employee_code, row.work_date, row.status.value) == ("EMP001", date(2025, 1, 15), "PRESENT")


def test_parser_rejects_rows_with_extra_values():
    with pytest.raises(ValidationError) as exc:
        parse_attendance_csv("employeeCode,date,status\nEMP001,2025-01-15,PRESENT,x,y\n")

    assert str(exc.value).startswith("Unable to read CSV file")


SRP_DAY = (
    "Daily Performance Report 15/01/2025\n"
    "1  EMP001  11  John Doe  S1  09:00  09:05  18:00  P\n"
    "2  EMP050  12  New Person  S1  09:00  09:10  17:00  P\n"
)


class _BrokenWriteRepository(SQLAlchemyAttendanceRepository):
    def _upsert_chunk(self, session, chunk):
        session.flush()
        raise RuntimeError("write failed")


def test_failed_srp_write_keeps_no_new_employees(container, make_employee):
    make_employee("John Doe", code="EMP001")
    importer = AttendanceImportService(
        _BrokenWriteRepository(),
        container.employees_repo,
        container.uploads_repo,
        container.employee_service,
    )

    with pytest.raises(RuntimeError):
        importer.import_file(filename="day.srp", content=SRP_DAY)

    assert Employee.query.filter_by(employee_code="EMP050").first() is None
    assert AttendanceRecord.query.count() == 0
    assert UploadHistory.query.one().status == UploadStatus.FAILED.value


def test_srp_placeholder_email_avoids_existing_address(container, make_employee):
    make_employee("John Doe", code="EMP001")
    db.session.add(Employee(name="Hr Person", email="emp050@company.com", employee_code="HR050"))
    db.session.commit()

    result = container.attendance_import_service.import_file(filename="day.srp", content=SRP_DAY)

    assert result.processed_records == 2
    created = Employee.query.filter_by(employee_code="EMP050").one()
    assert created.email == "emp050.2@company.com"
