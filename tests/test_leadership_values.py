def _create(client, headers, value="Integrity", description="Doing the right thing"):
    r = client.post("/api/leadership-values", json={"value": value, "description": description}, headers=headers)
    assert r.status_code == 201
    return r.json()["data"]


def test_list_is_public(client, auth_headers):
    _create(client, auth_headers)
    r = client.get("/api/leadership-values")
    assert r.status_code == 200
    assert [v["value"] for v in r.json()] == ["Integrity"]


def test_create_and_get(client, auth_headers):
    created = _create(client, auth_headers)
    r = client.get(f"/api/leadership-values/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json() == created


def test_create_invalid(client, auth_headers):
    r = client.post("/api/leadership-values", json={"value": ""}, headers=auth_headers)
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid leadership value data"
    assert body["errors"].startswith("Validation error")
    assert '"description"' in body["errors"]


def test_update(client, auth_headers):
    created = _create(client, auth_headers)
    r = client.put(
        f"/api/leadership-values/{created['id']}",
        json={"value": "Courage", "description": "Acting despite fear"},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["data"]["value"] == "Courage"

    r = client.put("/api/leadership-values/999", json={"value": "x", "description": "y"}, headers=auth_headers)
    assert r.status_code == 404

    r = client.put(f"/api/leadership-values/{created['id']}", json={}, headers=auth_headers)
    assert r.status_code == 400


def test_delete(client, auth_headers):
    created = _create(client, auth_headers)
    r = client.delete(f"/api/leadership-values/{created['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["message"] == "Leadership value deleted successfully"
    assert client.get("/api/leadership-values").json() == []


def test_delete_missing_is_404(client, auth_headers):
    r = client.delete("/api/leadership-values/12345", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "Leadership value not found"


def test_non_numeric_id_is_400(client, auth_headers):
    for method in ("GET", "PUT", "DELETE"):
        r = client.request(method, "/api/leadership-values/abc", headers=auth_headers)
        assert r.status_code == 400
        assert r.json()["message"] == "Invalid ID format"
