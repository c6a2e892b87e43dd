from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.notifications.schemas import NotificationResponse, MarkAllReadResponse
from informatch.modules.notifications.service import NotificationService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_service(supabase: Client = Depends(get_service_supabase)) -> NotificationService:
    return NotificationService(supabase)


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    unread_only: bool = False,
    current_user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service)
):
    """List the caller's notifications, newest first"""
    return service.list_notifications(current_user["id"], unread_only=unread_only)


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    current_user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service)
):
    return MarkAllReadResponse(updated=service.mark_all_read(current_user["id"]))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service)
):
    return service.mark_read(current_user["id"], notification_id)


@router.delete("/{notification_id}", status_code=204)
async def delete_notification(
    notification_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: NotificationService = Depends(get_notification_service)
):
    service.delete_notification(current_user["id"], notification_id)
    return None
