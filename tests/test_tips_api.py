def test_all_tips(client):
    tips = client.get("/api/tips").get_json()
    assert len(tips) == 10
    assert {"id", "title", "description", "category", "difficulty", "potentialSavings",
            "icon"} <= set(tips[0])


def test_tips_by_category(client):
    tips = client.get("/api/tips?category=hydration").get_json()
    assert len(tips) == 5
    assert all(tip["category"] == "hydration" for tip in tips)


def test_unknown_category_is_empty(client):
    assert client.get("/api/tips?category=gardening").get_json() == []


def test_random_tip_is_from_catalog(client):
    catalog_ids = {tip["id"] for tip in client.get("/api/tips").get_json()}
    for _ in range(10):
        assert client.get("/api/tips/random").get_json()["id"] in catalog_ids
