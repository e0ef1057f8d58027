def _create(client, **extra):
    payload = {"name": "John Doe", "email": "John@Company.com", "employeeCode": "emp001"}
    payload.update(extra)
    return client.post("/api/employees", json=payload)


def test_create_normalises_email_and_code(client):
    res = _create(client)

    assert res.status_code == 201
    data = res.get_json()["data"]
    assert data["email"] == "john@company.com"
    assert data["employeeCode"] == "EMP001"
    assert data["isActive"] is True


def test_duplicates_conflict(client):
    _create(client)

    assert _create(client, employeeCode="EMP002").status_code == 409
    assert _create(client, email="other@company.com").status_code == 409


def test_invalid_email_is_400(client):
    res = _create(client, email="not-an-email")

    assert res.status_code == 400
    assert res.get_json()["error"] == "Validation failed"


def test_lookup_by_code_refuses_inactive(client):
    emp_id = _create(client).get_json()["data"]["id"]

    assert client.get("/api/employees/code/emp001").status_code == 200
    client.put(f"/api/employees/{emp_id}", json={"isActive": False})
    assert client.get("/api/employees/code/EMP001").status_code == 403
    assert client.get("/api/employees/code/NOPE").status_code == 404


def test_list_search(client):
    _create(client)
    _create(client, name="Jane Smith", email="jane@company.com", employeeCode="EMP002")

    names = [e["name"] for e in client.get("/api/employees?search=jane").get_json()["data"]]

    assert names == ["Jane Smith"]


def test_update_with_null_name_is_400(client):
    emp_id = _create(client).get_json()["data"]["id"]

    res = client.put(f"/api/employees/{emp_id}", json={"name": None})

    assert res.status_code == 400
    assert res.get_json()["error"] == "Validation failed"
    assert client.get(f"/api/employees/{emp_id}").get_json()["data"]["name"] == "John Doe"

    res = client.put(f"/api/employees/{emp_id}", json={"department": None})
    assert res.status_code == 200
    assert res.get_json()["data"]["department"] is None
