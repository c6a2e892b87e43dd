"""
Core dependencies for route protection
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from informatch.database.supabase_client import get_supabase
from informatch.modules.auth.service import AuthService
from supabase import Client
from typing import Optional, Dict, Any

security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials],
    auth_service: AuthService
) -> Dict[str, Any]:
    """Resolve bearer credentials to the Supabase user, raising 401 when absent or invalid."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return auth_service.get_current_user(credentials.credentials)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    return authenticate(credentials, auth_service)
