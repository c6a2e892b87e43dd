from supabase import Client
from informatch.modules.suggestions.schemas import Candidate, SuggestionsResponse
from informatch.modules.suggestions.ranker import rank_candidates
from informatch.modules.profiles.service import ProfileService, PROFILE_SETUP_MESSAGE, apply_privacy
from informatch.modules.connections.service import ConnectionService
from informatch.modules.blocks.service import BlockService
from informatch.modules.users.service import UserService, DEFAULT_PRIVACY
from informatch.core.errors import to_http_exception
from typing import Any, Dict, List, Set
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class SuggestionService:
    """Ranks the profiles a user may want to connect with.

    Read-only: every call recomputes from the current tables. Any failed
    read aborts the whole computation, so callers never see a partial list.
    """

    def __init__(self, supabase: Client, academic_weight: int = 2, non_academic_weight: int = 1):
        self.supabase = supabase
        self.academic_weight = academic_weight
        self.non_academic_weight = non_academic_weight
        self.profiles = ProfileService(supabase)
        self.connections = ConnectionService(supabase)
        self.blocks = BlockService(supabase)
        self.users = UserService(supabase)

    def get_suggestions(self, user_id: str) -> SuggestionsResponse:
        try:
            current_profile = self.profiles.find_profile(user_id)
            if not current_profile:
                logger.info(f"No profile for {user_id}; returning empty suggestions")
                return SuggestionsResponse(suggestions=[], message=PROFILE_SETUP_MESSAGE)

            connected_ids = self.connections.get_matched_ids(user_id) | \
                self.connections.get_pending_ids(user_id)
            blocked_ids = self.blocks.get_blocked_ids(user_id)
            blocked_by_ids = self.blocks.get_blocked_by_ids(user_id)
            logger.debug(
                f"Filtering for {user_id}: connected/pending={len(connected_ids)} "
                f"blocked={len(blocked_ids)} blocked_by={len(blocked_by_ids)}"
            )

            candidates = self._fetch_candidates(user_id, connected_ids | blocked_ids | blocked_by_ids)
            privacy = self.users.get_privacy_map(c["user_id"] for c in candidates)

            # Private accounts stay discoverable; is_private only changes how connecting works
            ranked = rank_candidates(
                current_profile, candidates, self.academic_weight, self.non_academic_weight
            )
            suggestions = [
                Candidate(**apply_privacy(c, privacy.get(c["user_id"], DEFAULT_PRIVACY)))
                for c in ranked
            ]
            logger.info(f"{len(suggestions)} suggestions for {user_id}")
            return SuggestionsResponse(suggestions=suggestions)
        except Exception as e:
            logger.error(f"Error computing suggestions for {user_id}: {e}")
            # every failed read is a server error here, including permission errors
            raise HTTPException(status_code=500, detail=to_http_exception(e).detail)

    def _fetch_candidates(self, user_id: str, excluded_ids: Set[str]) -> List[Dict[str, Any]]:
        """Every profile except the requester's own and the excluded users, in profile_id order"""
        query = self.supabase.table("profiles")\
            .select("*")\
            .neq("user_id", user_id)
        if excluded_ids:
            query = query.not_.in_("user_id", sorted(excluded_ids))
        result = query.order("profile_id").execute()
        return result.data or []
