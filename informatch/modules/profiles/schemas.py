from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date, datetime


class ProfileUpsert(BaseModel):
    profile_username: str
    profile_birthdate: date
    profile_bio: Optional[str] = None
    profile_academic_interests: Optional[str] = None
    profile_non_academic_interests: Optional[str] = None
    profile_looking_for: Optional[str] = None
    profile_avatar_url: Optional[str] = None
    profile_gender: Optional[str] = None
    profile_phone: Optional[str] = None

    @field_validator("profile_username")
    @classmethod
    def username_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username is required")
        return value

    @field_validator(
        "profile_bio", "profile_academic_interests", "profile_non_academic_interests",
        "profile_looking_for", "profile_avatar_url", "profile_gender", "profile_phone"
    )
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class ProfileResponse(BaseModel):
    profile_id: int
    user_id: str
    profile_username: str
    profile_bio: Optional[str] = None
    profile_birthdate: Optional[date] = None
    profile_academic_interests: Optional[str] = None
    profile_non_academic_interests: Optional[str] = None
    profile_looking_for: Optional[str] = None
    profile_avatar_url: Optional[str] = None
    profile_gender: Optional[str] = None
    profile_phone: Optional[str] = None
    profile_created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PublicProfileResponse(ProfileResponse):
    """Another user's profile; bio/birthdate are null when the owner hides them"""
    user_priset_show_age: bool = True
    user_priset_show_bio: bool = True
    user_priset_is_private: bool = False


class ProfileImageSet(BaseModel):
    image_url: str


class ProfileImageResponse(BaseModel):
    image_id: int
    profile_id: int
    image_url: str
    image_order: int
    uploaded_at: Optional[datetime] = None

    class Config:
        from_attributes = True
