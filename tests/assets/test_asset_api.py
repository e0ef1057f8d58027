from employee_tracker.assets.model import Asset, AssetAssignment
from employee_tracker.database.extensions import db


def _asset(client, **extra):
    payload = {"assetName": "ThinkPad T14", "assetType": "LAPTOP", "serialNumber": "SN-1"}
    payload.update(extra)
    return client.post("/api/assets", json=payload)


def test_duplicate_serial_is_rejected(client):
    assert _asset(client).status_code == 201
    assert _asset(client).status_code == 409


def test_assign_and_return_round_trip(client, make_employee):
    emp = make_employee()
    asset_id = _asset(client).get_json()["data"]["id"]

    res = client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": emp.id, "assignedBy": "admin"})
    assert res.status_code == 201
    assignment = res.get_json()["data"]
    assert assignment["status"] == "ACTIVE"
    assert client.get(f"/api/assets/{asset_id}").get_json()["data"]["status"] == "ASSIGNED"

    res = client.put(
        "/api/assets/assign",
        json={"assignmentId": assignment["id"], "returnCondition": "FAIR", "returnedBy": "admin"},
    )
    assert res.status_code == 200
    assert res.get_json()["data"]["status"] == "RETURNED"

    asset = client.get(f"/api/assets/{asset_id}").get_json()["data"]
    assert asset["status"] == "AVAILABLE"
    assert asset["condition"] == "FAIR"

    # returning twice is refused
    again = client.put("/api/assets/assign", json={"assignmentId": assignment["id"]})
    assert again.status_code == 409


def test_double_assignment_leaves_no_partial_state(client, make_employee):
    first = make_employee("A One")
    second = make_employee("B Two")
    asset_id = _asset(client).get_json()["data"]["id"]
    client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": first.id})

    res = client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": second.id})

    assert res.status_code == 409
    assert res.get_json()["error"] == "Asset is already assigned to someone"
    assert AssetAssignment.query.count() == 1
    assert AssetAssignment.query.one().employee_id == first.id


def test_assign_to_unknown_employee_keeps_asset_available(client):
    asset_id = _asset(client).get_json()["data"]["id"]

    res = client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": 404})

    assert res.status_code == 404
    assert db.session.get(Asset, asset_id).status == "AVAILABLE"
    assert AssetAssignment.query.count() == 0


def test_assigned_asset_cannot_be_deleted(client, make_employee):
    emp = make_employee()
    asset_id = _asset(client).get_json()["data"]["id"]
    client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": emp.id})

    assert client.delete(f"/api/assets/{asset_id}").status_code == 409


def test_search_paginates_and_filters_by_holder(client, make_employee):
    emp = make_employee("Maria Holder", code="EMP777")
    for i in range(12):
        _asset(client, serialNumber=f"SN-{i}", assetName=f"Laptop {i}")
    client.post("/api/assets/assign", json={"assetId": 1, "employeeId": emp.id})

    body = client.get("/api/assets?page=2&limit=5").get_json()
    assert len(body["data"]) == 5
    assert body["pagination"] == {"total": 12, "page": 2, "limit": 5, "totalPages": 3, "hasNext": True, "hasPrev": True}

    held = client.get("/api/assets?employeeCode=emp777").get_json()
    assert [a["id"] for a in held["data"]] == [1]

    assert client.get("/api/assets?status=all").get_json()["pagination"]["total"] == 12


def test_history_and_employee_assets(client, make_employee):
    emp = make_employee()
    asset_id = _asset(client).get_json()["data"]["id"]
    client.post("/api/assets/assign", json={"assetId": asset_id, "employeeId": emp.id})

    history = client.get(f"/api/assets/history?employeeId={emp.id}").get_json()
    assert history["pagination"]["total"] == 1

    held = client.get(f"/api/assets/employee/{emp.id}").get_json()["data"]
    assert [a["assetId"] for a in held] == [asset_id]
    assert client.get("/api/assets/employee/999").status_code == 404


def test_update_rejects_null_name_and_condition(client):
    asset_id = _asset(client).get_json()["data"]["id"]

    assert client.put(f"/api/assets/{asset_id}", json={"assetName": None}).status_code == 400
    assert client.put(f"/api/assets/{asset_id}", json={"condition": None}).status_code == 400
    assert db.session.get(Asset, asset_id).asset_name == "ThinkPad T14"
