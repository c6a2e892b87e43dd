from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import date


class Candidate(BaseModel):
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
    user_priset_show_age: bool = True
    user_priset_show_bio: bool = True
    user_priset_is_private: bool = False
    compatibility_score: int = 0


class SuggestionsResponse(BaseModel):
    suggestions: List[Candidate] = []
    message: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        """JSON body; "message" only appears on the advisory empty result"""
        body = self.model_dump(mode="json", exclude={"message"})
        if self.message:
            body["message"] = self.message
        return body
