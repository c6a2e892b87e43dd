from informatch.modules.suggestions.ranker import parse_interests, compatibility_score, rank_candidates


def profile(user_id, academic=None, non_academic=None):
    return {
        "user_id": user_id,
        "profile_academic_interests": academic,
        "profile_non_academic_interests": non_academic,
    }


def test_parse_interests_trims_lowercases_and_drops_empties():
    assert parse_interests(" AI, Security ,,  machine Learning , ") == {"ai", "security", "machine learning"}


def test_parse_interests_empty_values():
    assert parse_interests(None) == set()
    assert parse_interests("") == set()
    assert parse_interests(" , ,") == set()


def test_parse_interests_collapses_duplicates():
    assert parse_interests("Chess, chess, CHESS") == {"chess"}


def test_academic_overlap_counts_double():
    me = profile("me", academic="AI, Security")
    other = profile("other", academic="ai, security, music")
    assert compatibility_score(me, other) == 4


def test_non_academic_overlap_counts_once():
    me = profile("me", academic="Physics", non_academic="Hiking, Chess")
    other = profile("other", academic="Physics", non_academic="chess, hiking, Piano")
    assert compatibility_score(me, other) == 2 * 1 + 2


def test_interest_lists_do_not_cross_match():
    me = profile("me", academic="Music")
    other = profile("other", non_academic="Music")
    assert compatibility_score(me, other) == 0


def test_custom_weights():
    me = profile("me", academic="AI", non_academic="Chess")
    other = profile("other", academic="AI", non_academic="Chess")
    assert compatibility_score(me, other, academic_weight=5, non_academic_weight=3) == 8


def test_rank_sorts_descending_and_keeps_zero_scores():
    me = profile("me", academic="AI, Security", non_academic="Chess")
    candidates = [
        profile("none"),
        profile("one", non_academic="chess"),
        profile("four", academic="security, ai"),
        profile("five", academic="AI, Security", non_academic="Chess"),
    ]
    ranked = rank_candidates(me, candidates)
    assert [c["user_id"] for c in ranked] == ["five", "four", "one", "none"]
    assert [c["compatibility_score"] for c in ranked] == [5, 4, 1, 0]


def test_rank_keeps_fetch_order_for_ties():
    me = profile("me", academic="AI")
    candidates = [profile("b", academic="AI"), profile("a"), profile("c", academic="ai"), profile("d")]
    ranked = rank_candidates(me, candidates)
    assert [c["user_id"] for c in ranked] == ["b", "c", "a", "d"]


def test_rank_does_not_mutate_input():
    me = profile("me", academic="AI")
    candidates = [profile("x", academic="AI")]
    rank_candidates(me, candidates)
    assert "compatibility_score" not in candidates[0]


def test_requester_without_interests_scores_everyone_zero():
    ranked = rank_candidates(profile("me"), [profile("x", academic="AI"), profile("y")])
    assert [c["compatibility_score"] for c in ranked] == [0, 0]
