def test_create_delete_and_list_backlog_item(client):
    res = client.post("/api/backlog", json={"task": "Write docs", "priority": "low", "estimatedHours": 2})
    assert res.status_code == 201
    item = res.json()
    assert item["id"] >= 1
    assert item["task"] == "Write docs"
    assert item["priority"] == "low"
    assert item["estimatedHours"] == 2

    res = client.delete(f"/api/backlog/{item['id']}")
    assert res.status_code == 204
    assert res.content == b""

    listed = client.get("/api/backlog").json()
    assert all(i["id"] != item["id"] for i in listed)


def test_delete_is_idempotent(client, repository):
    item = client.post("/api/backlog", json={"task": "Once"}).json()

    first = client.delete(f"/api/backlog/{item['id']}")
    second = client.delete(f"/api/backlog/{item['id']}")
    assert first.status_code == 204
    assert second.status_code == 204
    assert repository.tables["backlog"] == []


def test_delete_unknown_item_leaves_others(client, repository):
    client.post("/api/backlog", json={"task": "Keep me"})
    res = client.delete("/api/backlog/999")
    assert res.status_code == 204
    assert len(repository.tables["backlog"]) == 1


def test_delete_with_non_numeric_id_is_bad_request(client, repository):
    res = client.delete("/api/backlog/first")
    assert res.status_code == 400
    assert repository.statements == 0


def test_backlog_listed_in_id_order_with_estimated_hours_column(client, repository):
    client.post("/api/backlog", json={"task": "B", "priority": "high", "estimatedHours": 6})
    client.post("/api/backlog", json={"task": "A", "priority": "medium", "estimatedHours": 3})

    assert repository.tables["backlog"][0]["estimated_hours"] == 6
    listed = client.get("/api/backlog").json()
    assert [i["task"] for i in listed] == ["B", "A"]
    assert [i["id"] for i in listed] == [1, 2]


def test_backlog_has_no_update_endpoint(client):
    res = client.put("/api/backlog/1", json={"task": "x"})
    assert res.status_code == 405


def test_malformed_backlog_body_is_bad_request(client, repository):
    res = client.post("/api/backlog", content=b"[", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert repository.tables["backlog"] == []
