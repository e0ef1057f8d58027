import io

from employee_tracker.flowace.model import FlowaceRecord
from employee_tracker.uploads.model import FlowaceUploadHistory

EXPORT = b"""Flowace Report
Member Name,Member Id,Date,Logged Hours,Productivity %
John Doe,EMP001,15-01-2025,8.5,85%
Priya,-,15-01-2025,6.5,65%
Ghost User,-,15-01-2025,2,10%
"""


def _upload(client, content=EXPORT, name="flowace.csv"):
    return client.post(
        "/api/flowace/upload",
        data={"file": (io.BytesIO(content), name)},
        content_type="multipart/form-data",
    )


def test_upload_links_known_codes_and_reconcile_links_by_name(client, make_employee):
    john = make_employee("John Doe", code="EMP001")
    priya = make_employee("Priya Sharma", code="EMP002")

    res = _upload(client)
    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["status"] == "COMPLETED"
    assert data["processedRecords"] == 3

    by_name = {r.employee_name: r for r in FlowaceRecord.query.all()}
    assert by_name["John Doe"].employee_id == john.id
    assert by_name["Priya"].employee_id is None

    outcome = client.post("/api/flowace/reconcile").get_json()["data"]
    assert outcome["totalUnmatchedRecords"] == 2
    assert outcome["successfulUpdates"] == 1
    assert outcome["failedUpdates"] == 1
    assert outcome["updates"][0]["employeeId"] == priya.id
    assert "partial name match" in outcome["updates"][0]["match"]
    assert FlowaceRecord.query.filter_by(employee_name="Priya").one().employee_code == "EMP002"

    # re-running only sees what is still unlinked
    again = client.post("/api/flowace/reconcile").get_json()["data"]
    assert again["totalUnmatchedRecords"] == 1


def test_list_includes_performance_category(client, make_employee):
    make_employee("John Doe", code="EMP001")
    _upload(client)

    rows = client.get("/api/flowace?search=john").get_json()["data"]

    assert len(rows) == 1
    assert rows[0]["performanceCategory"] == "EXCELLENT"


def test_reupload_creates_new_rows_and_batch_delete_removes_them(client):
    first = _upload(client).get_json()["data"]
    _upload(client)
    assert FlowaceRecord.query.count() == 6

    history = client.get("/api/flowace/upload-history").get_json()["data"]["history"]
    assert len(history) == 2

    res = client.delete(f"/api/flowace/upload-history/{first['batchId']}")
    assert res.get_json()["data"]["deletedRecords"] == 3
    assert FlowaceRecord.query.count() == 3
    assert FlowaceUploadHistory.query.count() == 1


def test_upload_rejects_non_csv(client):
    res = _upload(client, name="flowace.xlsx")

    assert res.status_code == 400


def test_delete_unknown_record_is_404(client):
    assert client.delete("/api/flowace?id=42").status_code == 404
    assert client.delete("/api/flowace").status_code == 400


def test_upload_with_unreadable_rows_is_400(client):
    res = _upload(client, content=b"Member Name,Member Id,Email\nA,B,C,D,E,F\n")

    assert res.status_code == 400
    assert res.get_json()["error"].startswith("Unable to read CSV file")
    assert FlowaceRecord.query.count() == 0
    assert FlowaceUploadHistory.query.count() == 0
