from employee_tracker.assignments.model import Assignment


def _tag(client, name, minutes):
    return client.post("/api/tags", json={"tagName": name, "timeMinutes": minutes}).get_json()["data"]["id"]


def test_tag_names_are_unique(client):
    _tag(client, "Data Entry", 5)

    res = client.post("/api/tags", json={"tagName": "Data Entry", "timeMinutes": 3})

    assert res.status_code == 409


def test_negative_minutes_rejected(client):
    res = client.post("/api/tags", json={"tagName": "X", "timeMinutes": -1})

    assert res.status_code == 400


def test_bulk_assign_reports_unknown_tags(client, make_employee):
    emp = make_employee()
    t1 = _tag(client, "Data Entry", 5)

    res = client.post("/api/assignments/bulk", json={"employeeId": emp.id, "tagIds": [t1, 98, 99]})

    assert res.status_code == 404
    assert res.get_json()["error"] == "Tags not found: 98, 99"
    assert Assignment.query.count() == 0


def test_bulk_assign_refuses_existing_pairs_atomically(client, make_employee):
    emp = make_employee()
    t1 = _tag(client, "Data Entry", 5)
    t2 = _tag(client, "Quality Check", 10)
    client.post("/api/assignments", json={"employeeId": emp.id, "tagId": t1})

    res = client.post("/api/assignments/bulk", json={"employeeId": emp.id, "tagIds": [t1, t2]})

    assert res.status_code == 409
    assert res.get_json()["error"] == "Assignments already exist for these tags: Data Entry"
    assert Assignment.query.count() == 1


def test_bulk_assign_creates_all(client, make_employee):
    emp = make_employee()
    t1 = _tag(client, "Data Entry", 5)
    t2 = _tag(client, "Quality Check", 10)

    res = client.post("/api/assignments/bulk", json={"employeeId": emp.id, "tagIds": [t1, t2], "isMandatory": True})

    assert res.status_code == 201
    assert res.get_json()["message"] == "Successfully created 2 assignments"
    listed = client.get(f"/api/assignments?employeeId={emp.id}").get_json()["data"]
    assert {a["tagId"] for a in listed} == {t1, t2}
    assert all(a["isMandatory"] for a in listed)


def test_toggle_mandatory_and_delete(client, make_employee):
    emp = make_employee()
    t1 = _tag(client, "Data Entry", 5)
    assignment_id = client.post("/api/assignments", json={"employeeId": emp.id, "tagId": t1}).get_json()["data"]["id"]

    res = client.patch(f"/api/assignments/{assignment_id}", json={"isMandatory": True})
    assert res.get_json()["data"]["isMandatory"] is True

    assert client.delete(f"/api/assignments/{assignment_id}").status_code == 200
    assert client.get(f"/api/assignments/{assignment_id}").status_code == 404
