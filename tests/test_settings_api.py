def test_get_seeded_settings(client):
    data = client.get("/api/settings").get_json()
    assert data["electricityLimit"] == "10"
    assert data["electricityUnit"] == "items"
    assert data["waterLimit"] == "14"
    assert data["weeklyAlerts"] is True


def test_patch_merges(client):
    response = client.patch("/api/settings", json={"waterLimit": "18", "savingTips": False})
    assert response.status_code == 200
    data = response.get_json()
    assert data["waterLimit"] == "18"
    assert data["savingTips"] is False
    assert data["electricityLimit"] == "10"

    data = client.patch("/api/settings", json={"electricityUnit": "kWh"}).get_json()
    assert data["waterLimit"] == "18"
    assert data["electricityUnit"] == "kWh"


def test_put_replaces_with_defaults(client):
    client.patch("/api/settings", json={"waterLimit": "18", "weeklyAlerts": False})
    data = client.put("/api/settings", json={"electricityLimit": "25"}).get_json()
    assert data["electricityLimit"] == "25"
    assert data["waterLimit"] == "14"
    assert data["weeklyAlerts"] is True


def test_settings_validation(client):
    response = client.patch("/api/settings", json={"waterLimit": "a lot"})
    assert response.status_code == 400
    data = response.get_json()
    assert data["message"] == "Invalid settings data"
    assert data["errors"][0]["field"] == "waterLimit"
    assert client.patch("/api/settings", json={"weeklyAlerts": None}).status_code == 400
    assert client.put("/api/settings", json=["not", "an", "object"]).status_code == 400


def test_boolean_limit_is_rejected(client):
    response = client.patch("/api/settings", json={"waterLimit": True})
    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"].startswith("waterLimit")
    assert client.get("/api/settings").get_json()["waterLimit"] == "14"


def test_oversized_limit_is_rejected(client):
    assert client.patch("/api/settings", json={"electricityLimit": "5" * 40}).status_code == 400


def test_alert_toggles_must_be_real_booleans(client):
    for value in ["no", "yes", 0, 1]:
        response = client.patch("/api/settings", json={"weeklyAlerts": value})
        assert response.status_code == 400
    assert client.get("/api/settings").get_json()["weeklyAlerts"] is True
    assert client.patch("/api/settings", json={"weeklyAlerts": False}).get_json()["weeklyAlerts"] is False
