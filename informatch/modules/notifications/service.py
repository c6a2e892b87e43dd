from supabase import Client
from informatch.modules.notifications.schemas import NotificationResponse
from informatch.core.errors import to_http_exception
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

MATCH_REQUEST = "match_request"
MATCH_ACCEPTED = "match_accepted"
MATCH_REJECTED = "match_rejected"
GENERAL = "general"


class NotificationService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_notification(
        self,
        user_id: str,
        from_user_id: Optional[str],
        notification_type: str,
        message: Optional[str] = None
    ) -> Dict[str, Any]:
        """Insert a notification for user_id; constraint errors propagate to the caller"""
        result = self.supabase.table("notifications").insert({
            "user_id": user_id,
            "from_user_id": from_user_id,
            "type": notification_type,
            "message": message,
            "read": False
        }).execute()
        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create notification")
        return result.data[0]

    def notify(self, user_id: str, from_user_id: Optional[str], notification_type: str, message: str) -> None:
        """Best-effort informational notification; a failure is logged, not raised"""
        try:
            self.create_notification(user_id, from_user_id, notification_type, message)
        except Exception as e:
            logger.error(f"Error creating {notification_type} notification for {user_id}: {e}")

    def list_notifications(self, user_id: str, unread_only: bool = False) -> List[NotificationResponse]:
        """Notifications for the caller, newest first"""
        try:
            query = self.supabase.table("notifications")\
                .select("*")\
                .eq("user_id", user_id)
            if unread_only:
                query = query.eq("read", False)
            result = query.order("created_at", desc=True).execute()
            return [NotificationResponse(**n) for n in result.data or []]
        except Exception as e:
            raise to_http_exception(e)

    def mark_read(self, user_id: str, notification_id: str) -> NotificationResponse:
        try:
            result = self.supabase.table("notifications")\
                .update({"read": True})\
                .eq("id", notification_id)\
                .eq("user_id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Notification not found")

            return NotificationResponse(**result.data[0])
        except Exception as e:
            raise to_http_exception(e)

    def mark_all_read(self, user_id: str) -> int:
        try:
            result = self.supabase.table("notifications")\
                .update({"read": True})\
                .eq("user_id", user_id)\
                .eq("read", False)\
                .execute()
            return len(result.data or [])
        except Exception as e:
            raise to_http_exception(e)

    def delete_notification(self, user_id: str, notification_id: str) -> bool:
        try:
            result = self.supabase.table("notifications")\
                .delete()\
                .eq("id", notification_id)\
                .eq("user_id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="Notification not found")
            return True
        except Exception as e:
            raise to_http_exception(e)
