from greensteps.weeks import monday_of_week


def post_entry(client, **fields):
    return client.post("/api/usage", json=fields)


def test_create_entry(client):
    response = post_entry(client, weekStartDate="2024-06-03", waterUsage="14", notes="first week")
    assert response.status_code == 200
    data = response.get_json()
    assert data["weekStartDate"] == "2024-06-03"
    assert data["waterUsage"] == "14"
    assert data["electricityUsage"] is None
    assert data["electricityUnit"] == "kWh"
    assert data["waterUnit"] == "L"
    assert data["userId"] == 1
    assert data["createdAt"]


def test_numbers_are_kept_as_text(client):
    data = post_entry(client, weekStartDate="2024-06-03", electricityUsage=12.5).get_json()
    assert data["electricityUsage"] == "12.5"


def test_duplicate_week_returns_conflict_with_existing_entry(client):
    post_entry(client, weekStartDate="2024-06-03", waterUsage="14")
    response = post_entry(client, weekStartDate="2024-06-03", waterUsage="20")
    assert response.status_code == 409
    data = response.get_json()
    assert data["canEdit"] is True
    assert data["existingEntry"]["waterUsage"] == "14"
    assert data["message"] == "Usage data already exists for this week"


def test_create_validation_errors(client):
    response = post_entry(client, waterUsage="14")
    assert response.status_code == 400
    data = response.get_json()
    assert data["message"] == "Invalid usage data"
    assert any(err["field"] == "weekStartDate" for err in data["errors"])


def test_create_rejects_non_monday_and_bad_numbers(client):
    assert post_entry(client, weekStartDate="2024-06-04").status_code == 400
    assert post_entry(client, weekStartDate="06/03/2024").status_code == 400
    assert post_entry(client, weekStartDate="2024-06-03", waterUsage="lots").status_code == 400
    assert post_entry(client, weekStartDate="2024-06-03", waterUsage="-1").status_code == 400


def test_create_requires_json_object(client):
    response = client.post("/api/usage", data="not json", content_type="application/json")
    assert response.status_code == 400


def test_list_entries_newest_first_with_limit(client):
    for week in ["2024-05-27", "2024-06-10", "2024-06-03"]:
        post_entry(client, weekStartDate=week)
    weeks = [e["weekStartDate"] for e in client.get("/api/usage").get_json()]
    assert weeks == ["2024-06-10", "2024-06-03", "2024-05-27"]
    limited = client.get("/api/usage?limit=2").get_json()
    assert len(limited) == 2
    assert len(client.get("/api/usage?limit=abc").get_json()) == 3
    assert len(client.get("/api/usage?limit=0").get_json()) == 3


def test_current_week(client):
    assert client.get("/api/usage/current").get_json() is None
    post_entry(client, weekStartDate=monday_of_week(), waterUsage="9")
    data = client.get("/api/usage/current").get_json()
    assert data["weekStartDate"] == monday_of_week()


def test_recent_window_is_ten(client, storage, user_id):
    for day in range(1, 13):
        storage.create_entry(user_id, f"2023-{day:02d}-01")
    assert len(client.get("/api/usage/recent").get_json()) == 10


def test_update_entry(client):
    created = post_entry(client, weekStartDate="2024-06-03", waterUsage="14",
                         electricityUsage="5").get_json()
    response = client.put(f"/api/usage/{created['id']}",
                          json={"waterUsage": "20", "id": 99, "userId": 5, "createdAt": "x"})
    assert response.status_code == 200
    data = response.get_json()
    assert data["id"] == created["id"]
    assert data["userId"] == created["userId"]
    assert data["createdAt"] == created["createdAt"]
    assert data["waterUsage"] == "20"
    assert data["electricityUsage"] == "5"


def test_update_unknown_entry(client):
    response = client.put("/api/usage/9999", json={"notes": "x"})
    assert response.status_code == 404
    assert response.get_json()["message"] == "Usage entry not found"


def test_update_validation_error(client):
    created = post_entry(client, weekStartDate="2024-06-03").get_json()
    response = client.put(f"/api/usage/{created['id']}", json={"waterUnit": ""})
    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "waterUnit"


def test_update_onto_existing_week_conflicts(client):
    post_entry(client, weekStartDate="2024-06-03")
    second = post_entry(client, weekStartDate="2024-06-10").get_json()
    response = client.put(f"/api/usage/{second['id']}", json={"weekStartDate": "2024-06-03"})
    assert response.status_code == 409


def test_unknown_route_keeps_status(client):
    assert client.get("/api/nothing-here").status_code == 404
    assert client.delete("/api/usage/1").status_code == 405


def test_boolean_usage_is_rejected(client):
    response = post_entry(client, weekStartDate="2024-06-03", electricityUsage=True)
    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"].startswith("electricityUsage")
    assert client.get("/api/usage").get_json() == []


def test_oversized_usage_is_rejected(client):
    response = post_entry(client, weekStartDate="2024-06-03", waterUsage="9" * 5000)
    assert response.status_code == 400
    assert post_entry(client, weekStartDate="2024-06-03", waterUsage="9" * 32).status_code == 200


def test_update_rejects_boolean_and_oversized_usage(client):
    created = post_entry(client, weekStartDate="2024-06-03", waterUsage="14").get_json()
    url = f"/api/usage/{created['id']}"
    assert client.put(url, json={"waterUsage": False}).status_code == 400
    assert client.put(url, json={"waterUsage": "1" * 33}).status_code == 400
    assert client.get("/api/usage").get_json()[0]["waterUsage"] == "14"


def test_text_is_stored_as_typed(client):
    data = post_entry(client, weekStartDate="2024-06-03", waterUsage=" 14 ",
                      notes="  indented note\n").get_json()
    assert data["waterUsage"] == " 14 "
    assert data["notes"] == "  indented note\n"


def test_blank_text_means_absent(client):
    data = post_entry(client, weekStartDate="2024-06-03", waterUsage="   ", notes=" ").get_json()
    assert data["waterUsage"] is None
    assert data["notes"] is None
