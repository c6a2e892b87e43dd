from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class BlockCreate(BaseModel):
    blocked_id: str


class BlockResponse(BaseModel):
    blocker_id: str
    blocked_id: str
    blocked_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BlockedUserResponse(BaseModel):
    blocked_id: str
    blocked_at: Optional[datetime] = None
    profile_username: Optional[str] = None
    profile_avatar_url: Optional[str] = None
