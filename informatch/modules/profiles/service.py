from supabase import Client
from informatch.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, PublicProfileResponse,
    ProfileImageSet, ProfileImageResponse
)
from informatch.modules.users.service import UserService
from informatch.modules.blocks.service import BlockService
from informatch.core.errors import to_http_exception, UNIQUE_VIOLATION
from informatch.config.settings import settings
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

PROFILE_SETUP_MESSAGE = "Please complete your profile setup first"


def apply_privacy(profile: Dict[str, Any], privacy: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a profile row carrying the owner's display flags, with hidden fields blanked"""
    show_age = privacy.get("user_priset_show_age", True) is not False
    show_bio = privacy.get("user_priset_show_bio", True) is not False
    visible = dict(profile)
    visible["user_priset_show_age"] = show_age
    visible["user_priset_show_bio"] = show_bio
    visible["user_priset_is_private"] = bool(privacy.get("user_priset_is_private", False))
    if not show_age:
        visible["profile_birthdate"] = None
    if not show_bio:
        visible["profile_bio"] = None
    return visible


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)
        self.blocks = BlockService(supabase)

    def find_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Raw profile row for a user, or None"""
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
            return result.data[0] if result.data else None
        except Exception as e:
            raise to_http_exception(e)

    def get_my_profile(self, user_id: str) -> ProfileResponse:
        profile = self.find_profile(user_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Profile not found")
        return ProfileResponse(**profile)

    def save_profile(self, user_id: str, profile_data: ProfileUpsert) -> ProfileResponse:
        """Create the caller's profile on first save, update it afterwards"""
        data = profile_data.model_dump()
        data["profile_birthdate"] = profile_data.profile_birthdate.isoformat()
        existing = self.find_profile(user_id)
        try:
            if existing:
                result = self.supabase.table("profiles")\
                    .update(data)\
                    .eq("user_id", user_id)\
                    .execute()
            else:
                data["user_id"] = user_id
                result = self.supabase.table("profiles").insert(data).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save profile")

            logger.info(f"Profile {'updated' if existing else 'created'} for user {user_id}")
            return ProfileResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, {UNIQUE_VIOLATION: "Username already taken"})

    def get_visible_profile(self, viewer_id: str, user_id: str) -> PublicProfileResponse:
        """Another user's profile with their privacy display flags applied"""
        if viewer_id != user_id and self.blocks.is_blocked_either_way(viewer_id, user_id):
            raise HTTPException(status_code=404, detail="Profile not found")
        profile = self.find_profile(user_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Profile not found")
        if viewer_id == user_id:
            return PublicProfileResponse(**profile, **self.users.get_privacy(user_id).model_dump(
                exclude={"user_priset_last_updated"}
            ))
        privacy = self.users.get_privacy(user_id).model_dump()
        return PublicProfileResponse(**apply_privacy(profile, privacy))

    def _require_profile(self, user_id: str) -> Dict[str, Any]:
        profile = self.find_profile(user_id)
        if not profile:
            raise HTTPException(status_code=400, detail=PROFILE_SETUP_MESSAGE)
        return profile

    @staticmethod
    def _check_order(image_order: int) -> None:
        if image_order < 1 or image_order > settings.max_profile_images:
            raise HTTPException(
                status_code=400,
                detail=f"Image order must be between 1 and {settings.max_profile_images}"
            )

    def list_images(self, viewer_id: str, user_id: str) -> List[ProfileImageResponse]:
        """Images of a user's profile in display order; hidden across a block like the profile"""
        if viewer_id != user_id and self.blocks.is_blocked_either_way(viewer_id, user_id):
            raise HTTPException(status_code=404, detail="Profile not found")
        profile = self.find_profile(user_id)
        if not profile:
            raise HTTPException(status_code=404, detail="Profile not found")
        try:
            result = self.supabase.table("profile_images")\
                .select("*")\
                .eq("profile_id", profile["profile_id"])\
                .order("image_order")\
                .execute()
            return [ProfileImageResponse(**image) for image in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def set_image(self, user_id: str, image_order: int, image_data: ProfileImageSet) -> ProfileImageResponse:
        """Put an image URL into one of the caller's ordered slots, replacing what was there"""
        self._check_order(image_order)
        profile = self._require_profile(user_id)
        try:
            existing = self.supabase.table("profile_images")\
                .select("image_id")\
                .eq("profile_id", profile["profile_id"])\
                .eq("image_order", image_order)\
                .execute()

            if existing.data:
                result = self.supabase.table("profile_images")\
                    .update({"image_url": image_data.image_url})\
                    .eq("image_id", existing.data[0]["image_id"])\
                    .execute()
            else:
                result = self.supabase.table("profile_images").insert({
                    "profile_id": profile["profile_id"],
                    "image_url": image_data.image_url,
                    "image_order": image_order
                }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to save image")

            return ProfileImageResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e, {UNIQUE_VIOLATION: "Image slot already in use"})

    def delete_image(self, user_id: str, image_order: int) -> bool:
        self._check_order(image_order)
        profile = self._require_profile(user_id)
        try:
            result = self.supabase.table("profile_images")\
                .delete()\
                .eq("profile_id", profile["profile_id"])\
                .eq("image_order", image_order)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Image not found")
            return True
        except Exception as e:
            raise to_http_exception(e)
