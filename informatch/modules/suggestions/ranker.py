from typing import Any, Dict, Iterable, List, Optional, Set

ACADEMIC_INTERESTS = "profile_academic_interests"
NON_ACADEMIC_INTERESTS = "profile_non_academic_interests"


def parse_interests(interests: Optional[str]) -> Set[str]:
    if not interests:
        return set()
    # split by comma, strip whitespace, lowercase, drop empties
    return {p.strip().lower() for p in interests.split(",") if p.strip()}


def compatibility_score(
    requester: Dict[str, Any],
    candidate: Dict[str, Any],
    academic_weight: int = 2,
    non_academic_weight: int = 1,
) -> int:
    """Weighted count of interest tokens the two profiles share."""
    shared_academic = parse_interests(requester.get(ACADEMIC_INTERESTS)) & \
        parse_interests(candidate.get(ACADEMIC_INTERESTS))
    shared_non_academic = parse_interests(requester.get(NON_ACADEMIC_INTERESTS)) & \
        parse_interests(candidate.get(NON_ACADEMIC_INTERESTS))
    return academic_weight * len(shared_academic) + non_academic_weight * len(shared_non_academic)


def rank_candidates(
    requester: Dict[str, Any],
    candidates: Iterable[Dict[str, Any]],
    academic_weight: int = 2,
    non_academic_weight: int = 1,
) -> List[Dict[str, Any]]:
    """
    Return copies of `candidates` carrying a `compatibility_score`, highest
    first. Candidates with nothing in common stay in the list with score 0;
    ties keep their input order.
    """
    scored = [
        {
            **candidate,
            "compatibility_score": compatibility_score(
                requester, candidate, academic_weight, non_academic_weight
            ),
        }
        for candidate in candidates
    ]
    # list.sort is stable, so equal scores keep fetch order
    scored.sort(key=lambda c: -c["compatibility_score"])
    return scored
