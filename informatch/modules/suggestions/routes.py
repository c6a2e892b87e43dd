from fastapi import APIRouter, Depends, HTTPException, Security
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials
from informatch.config.settings import settings
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.auth.service import AuthService
from informatch.modules.suggestions.service import SuggestionService
from informatch.core.dependencies import security, get_auth_service, authenticate
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


def get_suggestion_service(supabase: Client = Depends(get_service_supabase)) -> SuggestionService:
    return SuggestionService(
        supabase,
        academic_weight=settings.academic_interest_weight,
        non_academic_weight=settings.non_academic_interest_weight
    )


@router.api_route("", methods=["GET", "POST"])
async def get_suggestions(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service),
    service: SuggestionService = Depends(get_suggestion_service)
):
    """Ranked match suggestions for the caller. Failures come back as {"error": ...}"""
    try:
        user = authenticate(credentials, auth_service)
        result = service.get_suggestions(user["id"])
    except HTTPException as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.detail})
    return JSONResponse(status_code=200, content=result.to_body())
