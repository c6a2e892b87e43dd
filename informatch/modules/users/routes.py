from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.users.schemas import UserResponse, PrivacySettings, PrivacyUpdate
from informatch.modules.users.service import UserService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_service_supabase)) -> UserService:
    return UserService(supabase)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Get the caller's account record (created on first access)"""
    return service.get_or_create_user(current_user)


@router.get("/me/privacy", response_model=PrivacySettings)
async def get_privacy(
    current_user: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    return service.get_privacy(current_user["id"])


@router.put("/me/privacy", response_model=PrivacySettings)
async def update_privacy(
    privacy_data: PrivacyUpdate,
    current_user: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Update the caller's privacy flags"""
    service.get_or_create_user(current_user)
    return service.update_privacy(current_user["id"], privacy_data)
