URL = "/api/v1/reports"


def test_report_user(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    response = client.post(URL, json={
        "reported_id": "alice",
        "reason": "spam",
        "details": "  Sends the same link to everyone  ",
    }, headers=headers)
    assert response.status_code == 201
    body = response.json()
    assert body["reporter_id"] == "me"
    assert body["details"] == "Sends the same link to everyone"
    assert body["blocked"] is False
    assert len(fake.tables["reports"]) == 1
    assert fake.tables["blocked_users"] == []


def test_details_required(client, make_user):
    headers = make_user("me")
    make_user("alice")
    response = client.post(URL, json={"reported_id": "alice", "details": "   "}, headers=headers)
    assert response.status_code == 422


def test_cannot_report_self(client, fake, make_user):
    headers = make_user("me")
    response = client.post(URL, json={"reported_id": "me", "details": "x"}, headers=headers)
    assert response.status_code == 400
    assert fake.tables["reports"] == []


def test_report_and_block(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    response = client.post(URL, json={"reported_id": "alice", "details": "rude", "block": True}, headers=headers)
    assert response.status_code == 201
    assert response.json()["blocked"] is True
    assert fake.tables["blocked_users"][0]["blocked_id"] == "alice"
    assert client.get("/api/v1/suggestions", headers=headers).json()["suggestions"] == []


def test_report_and_block_when_already_blocked(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    fake.insert_row("blocked_users", {"blocker_id": "me", "blocked_id": "alice"})
    response = client.post(URL, json={"reported_id": "alice", "details": "rude", "block": True}, headers=headers)
    assert response.status_code == 201
    assert len(fake.tables["blocked_users"]) == 1
