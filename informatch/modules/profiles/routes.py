from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, PublicProfileResponse,
    ProfileImageSet, ProfileImageResponse
)
from informatch.modules.profiles.service import ProfileService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(supabase: Client = Depends(get_service_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the caller's own profile"""
    return service.get_my_profile(current_user["id"])


@router.put("/me", response_model=ProfileResponse)
async def save_my_profile(
    profile_data: ProfileUpsert,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update the caller's profile"""
    service.users.get_or_create_user(current_user)
    return service.save_profile(current_user["id"], profile_data)


@router.get("/me/images", response_model=List[ProfileImageResponse])
async def list_my_images(
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    return service.list_images(current_user["id"], current_user["id"])


@router.put("/me/images/{image_order}", response_model=ProfileImageResponse)
async def set_my_image(
    image_order: int,
    image_data: ProfileImageSet,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Set the image shown at position image_order (1-based)"""
    return service.set_image(current_user["id"], image_order, image_data)


@router.delete("/me/images/{image_order}", status_code=204)
async def delete_my_image(
    image_order: int,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    service.delete_image(current_user["id"], image_order)
    return None


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def get_profile(
    user_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Get another user's profile (hidden fields follow their privacy settings)"""
    return service.get_visible_profile(current_user["id"], user_id)


@router.get("/{user_id}/images", response_model=List[ProfileImageResponse])
async def list_images(
    user_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    return service.list_images(current_user["id"], user_id)
