from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserResponse(BaseModel):
    user_id: str
    user_email: str
    user_phone: Optional[str] = None
    user_created_at: Optional[datetime] = None
    user_email_verified: bool = False
    user_phone_verified: bool = False
    user_priset_is_private: bool = False
    user_priset_show_age: bool = True
    user_priset_show_bio: bool = True
    user_priset_last_updated: Optional[datetime] = None

    class Config:
        from_attributes = True


class PrivacySettings(BaseModel):
    user_priset_is_private: bool = False
    user_priset_show_age: bool = True
    user_priset_show_bio: bool = True
    user_priset_last_updated: Optional[datetime] = None


class PrivacyUpdate(BaseModel):
    user_priset_is_private: Optional[bool] = None
    user_priset_show_age: Optional[bool] = None
    user_priset_show_bio: Optional[bool] = None
