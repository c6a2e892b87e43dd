from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime


class ProfileSummary(BaseModel):
    user_id: str
    profile_username: Optional[str] = None
    profile_avatar_url: Optional[str] = None


class ConnectionRequestCreate(BaseModel):
    target_user_id: str


class ConnectionRequestResponse(BaseModel):
    id: str
    requester_id: str
    recipient_id: str
    match_request_id: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None
    counterpart: Optional[ProfileSummary] = None


class MatchResponse(BaseModel):
    match_id: int
    match_user1_id: str
    match_user2_id: str
    matched_at: Optional[datetime] = None
    counterpart: Optional[ProfileSummary] = None


class SendRequestResponse(BaseModel):
    status: Literal["pending", "matched"]
    request: Optional[ConnectionRequestResponse] = None
    match: Optional[MatchResponse] = None
