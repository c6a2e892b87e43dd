from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

NotificationType = Literal["match_request", "match_accepted", "match_rejected", "general"]


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    from_user_id: Optional[str] = None
    type: NotificationType
    message: Optional[str] = None
    read: bool = False
    match_request_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MarkAllReadResponse(BaseModel):
    updated: int
