from datetime import datetime

from employee_tracker.database.extensions import db
from employee_tracker.issues.model import Issue


def _raise(client, employee_id, category="IT"):
    return client.post(
        "/api/issues",
        json={"employeeId": employee_id, "issueCategory": category, "issueDescription": "Laptop fan is loud"},
    )


def test_new_issue_is_pending(client, make_employee):
    emp = make_employee()

    res = _raise(client, emp.id)

    assert res.status_code == 201
    data = res.get_json()["data"]
    assert data["issueStatus"] == "pending"
    assert data["daysElapsed"] == 0
    assert data["resolvedDate"] is None


def test_unknown_employee_and_missing_issue(client):
    assert _raise(client, 404).status_code == 404
    assert client.get("/api/issues/1").status_code == 404


def test_resolving_stamps_date_and_reopening_clears_it(client, make_employee):
    emp = make_employee()
    issue_id = _raise(client, emp.id).get_json()["data"]["id"]
    issue = db.session.get(Issue, issue_id)
    issue.raised_date = datetime(2000, 1, 1)
    db.session.commit()

    resolved = client.put(f"/api/issues/{issue_id}", json={"issueStatus": "resolved", "adminResponse": "Replaced"}).get_json()["data"]
    assert resolved["resolvedDate"] is not None
    assert resolved["adminResponse"] == "Replaced"
    assert resolved["daysElapsed"] > 365

    reopened = client.put(f"/api/issues/{issue_id}", json={"issueStatus": "in_progress"}).get_json()["data"]
    assert reopened["resolvedDate"] is None
    assert reopened["issueStatus"] == "in_progress"


def test_invalid_status_is_rejected(client, make_employee):
    emp = make_employee()
    issue_id = _raise(client, emp.id).get_json()["data"]["id"]

    assert client.put(f"/api/issues/{issue_id}", json={"issueStatus": "closed"}).status_code == 400


def test_list_filters(client, make_employee):
    a = make_employee("A")
    b = make_employee("B")
    _raise(client, a.id)
    second = _raise(client, b.id).get_json()["data"]["id"]
    client.put(f"/api/issues/{second}", json={"issueStatus": "resolved"})

    assert len(client.get(f"/api/issues?employeeId={a.id}").get_json()["data"]) == 1
    resolved = client.get("/api/issues?status=resolved").get_json()["data"]
    assert [i["id"] for i in resolved] == [second]
