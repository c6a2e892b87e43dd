from supabase import Client
from informatch.modules.blocks.schemas import BlockCreate, BlockResponse, BlockedUserResponse
from informatch.core.errors import to_http_exception, UNIQUE_VIOLATION, CHECK_VIOLATION, FOREIGN_KEY_VIOLATION
from typing import List, Set
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

BLOCK_ERRORS = {
    UNIQUE_VIOLATION: "User already blocked",
    CHECK_VIOLATION: "You cannot block yourself",
    FOREIGN_KEY_VIOLATION: "User not found",
}


class BlockService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def block_user(self, blocker_id: str, block_data: BlockCreate) -> BlockResponse:
        """Block a user. The block is directed: blocker -> blocked"""
        if block_data.blocked_id == blocker_id:
            raise HTTPException(status_code=400, detail="You cannot block yourself")
        try:
            result = self.supabase.table("blocked_users").insert({
                "blocker_id": blocker_id,
                "blocked_id": block_data.blocked_id
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to block user")

            logger.info(f"User {blocker_id} blocked {block_data.blocked_id}")
            return BlockResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, BLOCK_ERRORS)

    def unblock_user(self, blocker_id: str, blocked_id: str) -> bool:
        """Remove a block created by the caller"""
        try:
            result = self.supabase.table("blocked_users")\
                .delete()\
                .eq("blocker_id", blocker_id)\
                .eq("blocked_id", blocked_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Block not found")

            logger.info(f"User {blocker_id} unblocked {blocked_id}")
            return True
        except Exception as e:
            raise to_http_exception(e)

    def list_blocked(self, blocker_id: str) -> List[BlockedUserResponse]:
        """List the users the caller has blocked, with their username and avatar"""
        try:
            result = self.supabase.table("blocked_users")\
                .select("blocked_id, blocked_at")\
                .eq("blocker_id", blocker_id)\
                .order("blocked_at", desc=True)\
                .execute()
            blocks = result.data or []
            if not blocks:
                return []

            profiles_result = self.supabase.table("profiles")\
                .select("user_id, profile_username, profile_avatar_url")\
                .in_("user_id", [b["blocked_id"] for b in blocks])\
                .execute()
            profiles = {p["user_id"]: p for p in profiles_result.data or []}

            blocked_users = []
            for block in blocks:
                profile = profiles.get(block["blocked_id"], {})
                blocked_users.append(BlockedUserResponse(
                    blocked_id=block["blocked_id"],
                    blocked_at=block.get("blocked_at"),
                    profile_username=profile.get("profile_username"),
                    profile_avatar_url=profile.get("profile_avatar_url")
                ))
            return blocked_users
        except Exception as e:
            raise to_http_exception(e)

    def get_blocked_ids(self, user_id: str) -> Set[str]:
        """Users that user_id has blocked"""
        result = self.supabase.table("blocked_users")\
            .select("blocked_id")\
            .eq("blocker_id", user_id)\
            .execute()
        return {row["blocked_id"] for row in result.data or []}

    def get_blocked_by_ids(self, user_id: str) -> Set[str]:
        """Users that have blocked user_id"""
        result = self.supabase.table("blocked_users")\
            .select("blocker_id")\
            .eq("blocked_id", user_id)\
            .execute()
        return {row["blocker_id"] for row in result.data or []}

    def is_blocked_either_way(self, user_a: str, user_b: str) -> bool:
        """True if either user has blocked the other"""
        try:
            result = self.supabase.table("blocked_users")\
                .select("blocker_id, blocked_id")\
                .in_("blocker_id", [user_a, user_b])\
                .in_("blocked_id", [user_a, user_b])\
                .execute()
            return any(row["blocker_id"] != row["blocked_id"] for row in result.data or [])
        except Exception as e:
            raise to_http_exception(e)
