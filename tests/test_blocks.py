URL = "/api/v1/blocks"


def test_block_and_list(client, fake, make_user):
    me = make_user("me")
    make_user("alice", username="alice_w")
    response = client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert response.status_code == 201
    assert response.json()["blocker_id"] == "me"
    assert response.json()["blocked_id"] == "alice"

    blocked = client.get(URL, headers=me).json()
    assert len(blocked) == 1
    assert blocked[0]["blocked_id"] == "alice"
    assert blocked[0]["profile_username"] == "alice_w"


def test_cannot_block_self(client, fake, make_user):
    me = make_user("me")
    response = client.post(URL, json={"blocked_id": "me"}, headers=me)
    assert response.status_code == 400
    assert fake.tables["blocked_users"] == []


def test_block_twice_is_conflict(client, make_user):
    me = make_user("me")
    make_user("alice")
    client.post(URL, json={"blocked_id": "alice"}, headers=me)
    response = client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert response.status_code == 409
    assert response.json()["detail"] == "User already blocked"


def test_block_is_directed(client, make_user):
    me = make_user("me")
    alice = make_user("alice")
    client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert client.get(URL, headers=alice).json() == []


def test_unblock(client, fake, make_user):
    me = make_user("me")
    make_user("alice")
    client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert client.delete(f"{URL}/alice", headers=me).status_code == 204
    assert fake.tables["blocked_users"] == []
    assert client.delete(f"{URL}/alice", headers=me).status_code == 404


def test_only_blocker_can_unblock(client, fake, make_user):
    me = make_user("me")
    alice = make_user("alice")
    client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert client.delete(f"{URL}/alice", headers=alice).status_code == 404
    assert len(fake.tables["blocked_users"]) == 1


def test_block_keeps_existing_match_rows(client, fake, make_user):
    me = make_user("me")
    make_user("alice")
    fake.insert_row("matches", {"match_user1_id": "me", "match_user2_id": "alice"})
    client.post(URL, json={"blocked_id": "alice"}, headers=me)
    assert len(fake.tables["matches"]) == 1
