from supabase import Client
from informatch.modules.connections.schemas import (
    ConnectionRequestCreate, ConnectionRequestResponse, MatchResponse,
    SendRequestResponse, ProfileSummary
)
from informatch.modules.users.service import UserService
from informatch.modules.blocks.service import BlockService
from informatch.modules.notifications.service import NotificationService, MATCH_REQUEST, MATCH_ACCEPTED
from informatch.modules.profiles.service import PROFILE_SETUP_MESSAGE
from informatch.core.errors import to_http_exception, UNIQUE_VIOLATION, CHECK_VIOLATION
from typing import List, Dict, Any, Iterable, Set
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

CONNECTION_ERRORS = {
    UNIQUE_VIOLATION: "Already connected or request pending",
    CHECK_VIOLATION: "You cannot connect with yourself",
}


class ConnectionService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)
        self.blocks = BlockService(supabase)
        self.notifications = NotificationService(supabase)

    def _profile_summaries(self, user_ids: Iterable[str]) -> Dict[str, ProfileSummary]:
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        result = self.supabase.table("profiles")\
            .select("user_id, profile_username, profile_avatar_url")\
            .in_("user_id", ids)\
            .execute()
        return {p["user_id"]: ProfileSummary(**p) for p in result.data or []}

    def _find_username(self, user_id: str) -> str:
        summary = self._profile_summaries([user_id]).get(user_id)
        return summary.profile_username if summary and summary.profile_username else "Someone"

    def get_matched_ids(self, user_id: str) -> Set[str]:
        """Users with an accepted connection to user_id, in either column"""
        result = self.supabase.table("matches")\
            .select("match_user1_id, match_user2_id")\
            .or_(f"match_user1_id.eq.{user_id},match_user2_id.eq.{user_id}")\
            .execute()
        return {
            row["match_user2_id"] if row["match_user1_id"] == user_id else row["match_user1_id"]
            for row in result.data or []
        }

    def get_pending_ids(self, user_id: str) -> Set[str]:
        """Users with a pending request to or from user_id"""
        result = self.supabase.table("notifications")\
            .select("user_id, from_user_id")\
            .eq("type", MATCH_REQUEST)\
            .or_(f"user_id.eq.{user_id},from_user_id.eq.{user_id}")\
            .execute()
        return {
            row["from_user_id"] if row["user_id"] == user_id else row["user_id"]
            for row in result.data or []
        }

    def _blocked_either_way_ids(self, user_id: str) -> Set[str]:
        return self.blocks.get_blocked_ids(user_id) | self.blocks.get_blocked_by_ids(user_id)

    def _find_match_between(self, user_a: str, user_b: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("matches")\
            .select("*")\
            .in_("match_user1_id", [user_a, user_b])\
            .in_("match_user2_id", [user_a, user_b])\
            .execute()
        return [m for m in result.data or [] if m["match_user1_id"] != m["match_user2_id"]]

    def _find_pending_between(self, user_a: str, user_b: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("notifications")\
            .select("*")\
            .eq("type", MATCH_REQUEST)\
            .in_("user_id", [user_a, user_b])\
            .in_("from_user_id", [user_a, user_b])\
            .execute()
        return [n for n in result.data or [] if n["user_id"] != n["from_user_id"]]

    def _get_request(self, notification_id: str, **match: str) -> Dict[str, Any]:
        query = self.supabase.table("notifications")\
            .select("*")\
            .eq("id", notification_id)\
            .eq("type", MATCH_REQUEST)
        for column, value in match.items():
            query = query.eq(column, value)
        result = query.limit(1).execute()
        if not result.data:
            raise HTTPException(status_code=404, detail="Connection request not found")
        return result.data[0]

    @staticmethod
    def _request_out(row: Dict[str, Any], counterpart: ProfileSummary = None) -> ConnectionRequestResponse:
        return ConnectionRequestResponse(
            id=row["id"],
            requester_id=row["from_user_id"],
            recipient_id=row["user_id"],
            match_request_id=row.get("match_request_id"),
            message=row.get("message"),
            created_at=row.get("created_at"),
            counterpart=counterpart
        )

    @staticmethod
    def _match_out(row: Dict[str, Any], counterpart: ProfileSummary = None) -> MatchResponse:
        return MatchResponse(
            match_id=row["match_id"],
            match_user1_id=row["match_user1_id"],
            match_user2_id=row["match_user2_id"],
            matched_at=row.get("matched_at"),
            counterpart=counterpart
        )

    def list_incoming(self, user_id: str) -> List[ConnectionRequestResponse]:
        """Pending requests sent to the caller, newest first"""
        try:
            result = self.supabase.table("notifications")\
                .select("*")\
                .eq("type", MATCH_REQUEST)\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            hidden = self._blocked_either_way_ids(user_id)
            rows = [r for r in result.data or [] if r["from_user_id"] not in hidden]
            profiles = self._profile_summaries(r["from_user_id"] for r in rows)
            # Requests from users without a profile are skipped
            return [
                self._request_out(r, profiles[r["from_user_id"]])
                for r in rows if r["from_user_id"] in profiles
            ]
        except Exception as e:
            raise to_http_exception(e)

    def list_outgoing(self, user_id: str) -> List[ConnectionRequestResponse]:
        """Pending requests the caller has sent, newest first"""
        try:
            result = self.supabase.table("notifications")\
                .select("*")\
                .eq("type", MATCH_REQUEST)\
                .eq("from_user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            hidden = self._blocked_either_way_ids(user_id)
            rows = [r for r in result.data or [] if r["user_id"] not in hidden]
            profiles = self._profile_summaries(r["user_id"] for r in rows)
            return [self._request_out(r, profiles.get(r["user_id"])) for r in rows]
        except Exception as e:
            raise to_http_exception(e)

    def list_matches(self, user_id: str) -> List[MatchResponse]:
        """Accepted connections of the caller (friend list), newest first"""
        try:
            result = self.supabase.table("matches")\
                .select("*")\
                .or_(f"match_user1_id.eq.{user_id},match_user2_id.eq.{user_id}")\
                .order("matched_at", desc=True)\
                .execute()
            rows = result.data or []

            def other(row):
                return row["match_user2_id"] if row["match_user1_id"] == user_id else row["match_user1_id"]

            profiles = self._profile_summaries(other(r) for r in rows)
            return [self._match_out(r, profiles.get(other(r))) for r in rows]
        except Exception as e:
            raise to_http_exception(e)

    def send_request(self, requester_id: str, request_data: ConnectionRequestCreate) -> SendRequestResponse:
        """Ask to connect with another user.

        A private recipient is matched instantly; anyone else receives a
        pending match_request notification. A second request for the same
        pair is refused with 409, either by the checks below or by the
        store's unique constraint when two requests race.
        """
        target_id = request_data.target_user_id
        if target_id == requester_id:
            raise HTTPException(status_code=400, detail="You cannot connect with yourself")

        try:
            profiles = self._profile_summaries([requester_id, target_id])
            if requester_id not in profiles:
                raise HTTPException(status_code=400, detail=PROFILE_SETUP_MESSAGE)
            if target_id not in profiles:
                raise HTTPException(status_code=404, detail="Profile not found")
            if self.blocks.is_blocked_either_way(requester_id, target_id):
                raise HTTPException(status_code=403, detail="You cannot connect with this user")
            if self._find_match_between(requester_id, target_id):
                raise HTTPException(status_code=409, detail="Already connected")
            if self._find_pending_between(requester_id, target_id):
                raise HTTPException(status_code=409, detail="Connection request already pending")

            username = profiles[requester_id].profile_username or "Someone"
            target_privacy = self.users.get_privacy(target_id)

            if target_privacy.user_priset_is_private:
                result = self.supabase.table("matches").insert({
                    "match_user1_id": requester_id,
                    "match_user2_id": target_id
                }).execute()
                if not result.data:
                    raise HTTPException(status_code=500, detail="Failed to create connection")
                self.notifications.notify(
                    target_id, requester_id, MATCH_ACCEPTED, f"{username} has matched with you!"
                )
                logger.info(f"Instant match {requester_id} -> {target_id}")
                return SendRequestResponse(
                    status="matched",
                    match=self._match_out(result.data[0], profiles[target_id])
                )

            row = self.notifications.create_notification(
                target_id, requester_id, MATCH_REQUEST, f"{username} wants to connect with you!"
            )
            logger.info(f"Connection request {requester_id} -> {target_id}")
            return SendRequestResponse(
                status="pending",
                request=self._request_out(row, profiles[target_id])
            )
        except Exception as e:
            raise to_http_exception(e, CONNECTION_ERRORS)

    def accept_request(self, user_id: str, notification_id: str) -> MatchResponse:
        """Recipient accepts: the match row is created and the request removed"""
        try:
            request = self._get_request(notification_id, user_id=user_id)
            requester_id = request["from_user_id"]
            if self.blocks.is_blocked_either_way(requester_id, user_id):
                raise HTTPException(status_code=403, detail="You cannot connect with this user")
            if self._find_match_between(requester_id, user_id):
                raise HTTPException(status_code=409, detail="Already connected")

            result = self.supabase.table("matches").insert({
                "match_user1_id": requester_id,
                "match_user2_id": user_id
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to accept request")

            self.supabase.table("notifications")\
                .delete()\
                .eq("id", notification_id)\
                .execute()

            self.notifications.notify(
                requester_id, user_id, MATCH_ACCEPTED,
                f"{self._find_username(user_id)} accepted your connection request!"
            )
            logger.info(f"Connection request {notification_id} accepted by {user_id}")
            return self._match_out(result.data[0], self._profile_summaries([requester_id]).get(requester_id))
        except Exception as e:
            raise to_http_exception(e, CONNECTION_ERRORS)

    def reject_request(self, user_id: str, notification_id: str) -> bool:
        """Recipient rejects: the request is deleted, leaving no relationship"""
        try:
            self._get_request(notification_id, user_id=user_id)
            self.supabase.table("notifications")\
                .delete()\
                .eq("id", notification_id)\
                .execute()
            logger.info(f"Connection request {notification_id} rejected by {user_id}")
            return True
        except Exception as e:
            raise to_http_exception(e)

    def cancel_request(self, user_id: str, notification_id: str) -> bool:
        """Requester withdraws a pending request"""
        try:
            self._get_request(notification_id, from_user_id=user_id)
            self.supabase.table("notifications")\
                .delete()\
                .eq("id", notification_id)\
                .execute()
            return True
        except Exception as e:
            raise to_http_exception(e)

    def remove_match(self, user_id: str, match_id: int) -> bool:
        """Either party removes an accepted connection"""
        try:
            result = self.supabase.table("matches")\
                .select("*")\
                .eq("match_id", match_id)\
                .limit(1)\
                .execute()
            if not result.data or user_id not in (
                result.data[0]["match_user1_id"], result.data[0]["match_user2_id"]
            ):
                raise HTTPException(status_code=404, detail="Connection not found")

            self.supabase.table("matches")\
                .delete()\
                .eq("match_id", match_id)\
                .execute()
            logger.info(f"Match {match_id} removed by {user_id}")
            return True
        except Exception as e:
            raise to_http_exception(e)
