from supabase import Client
from informatch.modules.users.schemas import UserResponse, PrivacySettings, PrivacyUpdate
from informatch.core.errors import to_http_exception, UNIQUE_VIOLATION
from typing import Dict, Any, Iterable, Optional
from datetime import datetime, timezone
from fastapi import HTTPException
from postgrest.exceptions import APIError
import logging

logger = logging.getLogger(__name__)

PRIVACY_COLUMNS = "user_id, user_priset_is_private, user_priset_show_age, user_priset_show_bio, user_priset_last_updated"

DEFAULT_PRIVACY = {
    "user_priset_is_private": False,
    "user_priset_show_age": True,
    "user_priset_show_bio": True,
}


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user(self, user_id: str) -> Optional[UserResponse]:
        """Get the users row for an auth user, or None if it was never created"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            if not result.data:
                return None
            return UserResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def get_or_create_user(self, auth_user: Dict[str, Any]) -> UserResponse:
        """Return the caller's users row, creating it from the auth record on first access"""
        existing = self.get_user(auth_user["id"])
        if existing:
            return existing
        try:
            logger.info(f"Creating user record for {auth_user['id']}")
            result = self.supabase.table("users").insert({
                "user_id": auth_user["id"],
                "user_email": auth_user.get("email") or "",
                "user_phone": auth_user.get("phone"),
                "user_email_verified": auth_user.get("email_confirmed_at") is not None,
                "user_phone_verified": auth_user.get("phone_confirmed_at") is not None
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to create user record")

            return UserResponse(**result.data[0])
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                # another request created the row first
                created = self.get_user(auth_user["id"])
                if created:
                    return created
            raise to_http_exception(e)
        except Exception as e:
            raise to_http_exception(e)

    def get_privacy(self, user_id: str) -> PrivacySettings:
        """Privacy flags for a user; defaults apply when no users row exists yet"""
        return PrivacySettings(**self.get_privacy_map([user_id]).get(user_id, DEFAULT_PRIVACY))

    def get_privacy_map(self, user_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
        """Privacy flags keyed by user_id for the given users (missing users are left out)"""
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        try:
            result = self.supabase.table("users")\
                .select(PRIVACY_COLUMNS)\
                .in_("user_id", ids)\
                .execute()
            return {row["user_id"]: row for row in result.data or []}
        except Exception as e:
            raise to_http_exception(e)

    def update_privacy(self, user_id: str, privacy_data: PrivacyUpdate) -> PrivacySettings:
        """Update the caller's own privacy flags; only fields present in the body change"""
        update_data = {"user_priset_last_updated": datetime.now(timezone.utc).isoformat()}
        if privacy_data.user_priset_is_private is not None:
            update_data["user_priset_is_private"] = privacy_data.user_priset_is_private
        if privacy_data.user_priset_show_age is not None:
            update_data["user_priset_show_age"] = privacy_data.user_priset_show_age
        if privacy_data.user_priset_show_bio is not None:
            update_data["user_priset_show_bio"] = privacy_data.user_priset_show_bio

        try:
            result = self.supabase.table("users")\
                .update(update_data)\
                .eq("user_id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="User not found")

            return PrivacySettings(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)
