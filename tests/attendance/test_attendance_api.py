import io
from datetime import date

from employee_tracker.attendance.model import Attendance, AttendanceRecord
from employee_tracker.database.extensions import db
from employee_tracker.uploads.model import UploadHistory


def _create(client, employee_id, day="2025-01-15", **extra):
    payload = {"employeeId": employee_id, "date": day, "status": "PRESENT", "checkInTime": "09:00", "checkOutTime": "17:30"}
    payload.update(extra)
    return client.post("/api/attendance", json=payload)


def test_create_computes_hours_and_rejects_duplicates(client, make_employee):
    emp = make_employee()

    res = _create(client, emp.id)
    assert res.status_code == 201
    body = res.get_json()
    assert body["success"] is True
    assert body["data"]["totalHours"] == 8.5
    assert body["data"]["importSource"] == "manual"

    dup = _create(client, emp.id)
    assert dup.status_code == 409
    assert dup.get_json()["success"] is False


def test_create_for_unknown_employee_is_404(client):
    assert _create(client, 999).status_code == 404


def test_create_with_invalid_status_is_400(client, make_employee):
    emp = make_employee()

    res = _create(client, emp.id, status="SOMETIMES")

    assert res.status_code == 400
    assert res.get_json()["error"] == "Validation failed"


def test_list_filters_by_month_and_ignores_all_status(client, make_employee):
    emp = make_employee()
    _create(client, emp.id, day="2025-01-15")
    _create(client, emp.id, day="2025-02-03", status="ABSENT", checkInTime=None, checkOutTime=None)

    res = client.get("/api/attendance?month=1&year=2025&status=ALL")
    body = res.get_json()
    assert [r["date"] for r in body["data"]] == ["2025-01-15"]
    assert body["meta"]["totalRecords"] == 1

    bad = client.get("/api/attendance?month=13&year=2025")
    assert bad.status_code == 400


def test_update_and_delete_legacy_and_current_rows(client, make_employee):
    emp = make_employee()
    legacy = Attendance(employee_id=emp.id, date=date(2025, 1, 10), status="PRESENT", total_hours=8)
    db.session.add(legacy)
    db.session.commit()
    created = _create(client, emp.id).get_json()["data"]

    res = client.put(f"/api/attendance/record/{created['id']}", json={"checkOutTime": "18:00"})
    assert res.status_code == 200
    assert res.get_json()["data"]["totalHours"] == 9.0

    res = client.put(f"/api/attendance/record/att_{legacy.id}", json={"status": "HALF_DAY"})
    assert res.status_code == 200
    assert res.get_json()["data"]["id"] == f"att_{legacy.id}"

    assert client.delete("/api/attendance/record/att_nope").status_code == 400
    assert client.delete(f"/api/attendance/record/att_{legacy.id}").status_code == 200
    assert Attendance.query.count() == 0


def test_employee_view_merges_tables_preferring_current_rows(client, make_employee):
    emp = make_employee()
    db.session.add_all(
        [
            Attendance(employee_id=emp.id, date=date(2025, 1, 15), status="ABSENT"),
            Attendance(employee_id=emp.id, date=date(2025, 1, 14), status="PRESENT", total_hours=8),
        ]
    )
    db.session.commit()
    _create(client, emp.id, day="2025-01-15")

    body = client.get(f"/api/attendance/employee/{emp.id}?month=1&year=2025").get_json()

    assert [(r["date"], r["status"]) for r in body["data"]] == [("2025-01-15", "PRESENT"), ("2025-01-14", "PRESENT")]
    assert body["meta"] == {"total": 2, "fromAttendanceRecord": 1, "fromAttendance": 1}


def test_summary_requires_month_and_year(client, make_employee):
    emp = make_employee()
    _create(client, emp.id)

    assert client.get(f"/api/attendance/employee/{emp.id}/summary").status_code == 400
    data = client.get(f"/api/attendance/employee/{emp.id}/summary?month=1&year=2025").get_json()["data"]
    assert data["presentDays"] == 1
    assert data["workingDays"] == 27


def test_upload_then_delete_batch(client, make_employee):
    make_employee(code="EMP001")
    csv = b"employeeCode,date,status\nEMP001,2025-01-15,PRESENT\nEMP001,2025-01-16,ABSENT\n"

    res = client.post(
        "/api/attendance/upload",
        data={"file": (io.BytesIO(csv), "attendance.csv")},
        content_type="multipart/form-data",
    )
    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["processedRecords"] == 2
    assert res.get_json()["message"] == "Successfully processed 2 out of 2 records"

    history = client.get("/api/attendance/upload-history").get_json()["data"]
    assert history[0]["batchId"] == data["batchId"]
    assert history[0]["status"] == "COMPLETED"

    res = client.delete(f"/api/attendance/delete-batch?batchId={data['batchId']}")
    assert res.get_json()["data"]["deletedRecords"] == 2
    assert AttendanceRecord.query.count() == 0
    assert UploadHistory.query.count() == 0

    assert client.delete("/api/attendance/delete-batch").status_code == 400
    assert client.delete("/api/attendance/delete-batch?batchId=missing").status_code == 404


def test_upload_without_file_is_400(client):
    res = client.post("/api/attendance/upload", data={}, content_type="multipart/form-data")

    assert res.status_code == 400
    assert res.get_json()["error"] == "No file uploaded"


def test_export_returns_xlsx(client, make_employee):
    emp = make_employee()
    _create(client, emp.id)

    res = client.get("/api/attendance/export")

    assert res.status_code == 200
    assert res.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert res.data[:2] == b"PK"


def test_month_without_year_is_400(client, make_employee):
    emp = make_employee()

    res = client.get("/api/attendance?month=1")
    assert res.status_code == 400
    assert res.get_json()["error"] == "Month and year must be provided together"
    assert client.get(f"/api/attendance/employee/{emp.id}?year=2025").status_code == 400


def test_update_rejects_null_for_required_columns(client, make_employee):
    emp = make_employee()
    created = _create(client, emp.id).get_json()["data"]

    res = client.put(f"/api/attendance/record/{created['id']}", json={"status": None})

    assert res.status_code == 400
    assert res.get_json()["error"] == "Validation failed"
    # optional columns may still be cleared
    res = client.put(f"/api/attendance/record/{created['id']}", json={"remarks": None})
    assert res.status_code == 200
