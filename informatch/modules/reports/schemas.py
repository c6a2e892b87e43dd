from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


class ReportCreate(BaseModel):
    reported_id: str
    reason: Optional[str] = None
    details: str
    block: bool = False

    @field_validator("details")
    @classmethod
    def details_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Details are required")
        return value


class ReportResponse(BaseModel):
    reports_id: int
    reporter_id: str
    reported_id: str
    reason: Optional[str] = None
    details: str
    reported_at: Optional[datetime] = None
    blocked: bool = False
