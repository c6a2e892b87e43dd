URL = "/api/v1/suggestions"


def suggested_ids(response):
    assert response.status_code == 200, response.text
    return [c["user_id"] for c in response.json()["suggestions"]]


def test_requires_authentication(client):
    response = client.get(URL)
    assert response.status_code == 401
    assert "error" in response.json()


def test_rejects_invalid_token(client):
    response = client.get(URL, headers={"Authorization": "Bearer not-a-real-token"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired token"}


def test_missing_profile_is_advisory_not_error(client, make_user):
    headers = make_user("me", profile=False)
    make_user("alice")
    response = client.get(URL, headers=headers)
    assert response.status_code == 200
    assert response.json() == {"suggestions": [], "message": "Please complete your profile setup first"}


def test_never_suggests_self(client, make_user):
    headers = make_user("me", academic="AI")
    make_user("alice", academic="AI")
    ids = suggested_ids(client.get(URL, headers=headers))
    assert "me" not in ids
    assert ids == ["alice"]


def test_ranks_by_shared_interests(client, make_user):
    headers = make_user("me", academic="AI, Security", non_academic="Chess")
    make_user("zero", academic="History")
    make_user("alice", academic="ai, security, music")
    make_user("bob", non_academic=" chess ")
    response = client.get(URL, headers=headers)
    body = response.json()
    assert [c["user_id"] for c in body["suggestions"]] == ["alice", "bob", "zero"]
    assert [c["compatibility_score"] for c in body["suggestions"]] == [4, 1, 0]
    assert "message" not in body


def test_candidate_record_shape(client, make_user):
    headers = make_user("me", academic="AI")
    make_user("alice", username="alice_w", academic="AI, Robotics", non_academic="Piano")
    candidate = client.get(URL, headers=headers).json()["suggestions"][0]
    assert candidate["profile_username"] == "alice_w"
    assert candidate["profile_academic_interests"] == "AI, Robotics"
    assert candidate["profile_non_academic_interests"] == "Piano"
    assert candidate["profile_birthdate"] == "2003-04-05"
    assert candidate["profile_looking_for"] == "Study partner"
    assert candidate["user_priset_show_age"] is True
    assert candidate["user_priset_show_bio"] is True
    assert candidate["user_priset_is_private"] is False
    assert isinstance(candidate["profile_id"], int)
    assert candidate["compatibility_score"] == 2


def test_excludes_accepted_matches_in_both_directions(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    make_user("bob")
    make_user("carol")
    fake.insert_row("matches", {"match_user1_id": "me", "match_user2_id": "alice"})
    fake.insert_row("matches", {"match_user1_id": "bob", "match_user2_id": "me"})
    assert suggested_ids(client.get(URL, headers=headers)) == ["carol"]


def test_excludes_pending_requests_in_both_directions(client, fake, make_user):
    headers = make_user("me")
    alice = make_user("alice")
    make_user("bob")
    make_user("carol")
    fake.insert_row("notifications", {"user_id": "alice", "from_user_id": "me", "type": "match_request"})
    fake.insert_row("notifications", {"user_id": "me", "from_user_id": "bob", "type": "match_request"})
    assert suggested_ids(client.get(URL, headers=headers)) == ["carol"]
    # the other side does not see the requester either
    assert "me" not in suggested_ids(client.get(URL, headers=alice))


def test_other_notification_types_do_not_exclude(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    fake.insert_row("notifications", {"user_id": "me", "from_user_id": "alice", "type": "general"})
    assert suggested_ids(client.get(URL, headers=headers)) == ["alice"]


def test_relationships_between_other_users_do_not_exclude(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    make_user("bob")
    fake.insert_row("matches", {"match_user1_id": "alice", "match_user2_id": "bob"})
    assert suggested_ids(client.get(URL, headers=headers)) == ["alice", "bob"]


def test_excludes_blocked_and_blocked_by(client, fake, make_user):
    headers = make_user("me")
    bob_headers = make_user("bob")
    make_user("alice")
    make_user("carol")
    fake.insert_row("blocked_users", {"blocker_id": "me", "blocked_id": "alice"})
    fake.insert_row("blocked_users", {"blocker_id": "bob", "blocked_id": "me"})
    assert suggested_ids(client.get(URL, headers=headers)) == ["carol"]
    assert "me" not in suggested_ids(client.get(URL, headers=bob_headers))


def test_unblocked_user_reappears(client, make_user):
    headers = make_user("me")
    make_user("alice")
    assert client.post("/api/v1/blocks", json={"blocked_id": "alice"}, headers=headers).status_code == 201
    assert suggested_ids(client.get(URL, headers=headers)) == []
    assert client.delete("/api/v1/blocks/alice", headers=headers).status_code == 204
    assert suggested_ids(client.get(URL, headers=headers)) == ["alice"]


def test_private_accounts_are_still_suggested(client, make_user):
    headers = make_user("me")
    make_user("alice", is_private=True)
    candidate = client.get(URL, headers=headers).json()["suggestions"][0]
    assert candidate["user_id"] == "alice"
    assert candidate["user_priset_is_private"] is True


def test_hidden_fields_are_blanked_but_flags_returned(client, make_user):
    headers = make_user("me")
    make_user("alice", show_age=False, show_bio=False)
    candidate = client.get(URL, headers=headers).json()["suggestions"][0]
    assert candidate["user_priset_show_age"] is False
    assert candidate["user_priset_show_bio"] is False
    assert candidate["profile_birthdate"] is None
    assert candidate["profile_bio"] is None


def test_candidate_without_users_row_gets_default_flags(client, fake, make_user):
    headers = make_user("me")
    fake.insert_row("profiles", {
        "user_id": "ghost",
        "profile_username": "ghost",
        "profile_birthdate": "2002-01-01",
    })
    candidate = client.get(URL, headers=headers).json()["suggestions"][0]
    assert candidate["user_id"] == "ghost"
    assert candidate["user_priset_show_age"] is True
    assert candidate["user_priset_is_private"] is False


def test_repeated_calls_are_identical(client, make_user):
    headers = make_user("me", academic="AI", non_academic="Chess")
    make_user("alice", academic="AI")
    make_user("bob", non_academic="Chess")
    make_user("carol")
    first = client.get(URL, headers=headers).json()
    second = client.get(URL, headers=headers).json()
    assert first == second


def test_post_invocation_matches_get(client, make_user):
    headers = make_user("me", academic="AI")
    make_user("alice", academic="AI")
    assert client.post(URL, headers=headers).json() == client.get(URL, headers=headers).json()


def test_backend_failure_is_500_without_partial_results(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    fake.failing_tables.add("blocked_users")
    response = client.get(URL, headers=headers)
    assert response.status_code == 500
    body = response.json()
    assert "error" in body
    assert "suggestions" not in body


def test_is_read_only(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    client.get(URL, headers=headers)
    assert fake.calls
    assert [call for call in fake.calls if call[1] != "select"] == []


def test_permission_failure_on_read_is_500(client, fake, make_user):
    headers = make_user("me")
    make_user("alice")
    fake.failure_code = "42501"
    fake.failing_tables.add("users")
    response = client.get(URL, headers=headers)
    assert response.status_code == 500
    assert "suggestions" not in response.json()
