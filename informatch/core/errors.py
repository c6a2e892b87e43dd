"""
Translation of Supabase/PostgREST failures into HTTP errors
"""

import logging
from typing import Dict, Optional

from fastapi import HTTPException, status
from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"
FOREIGN_KEY_VIOLATION = "23503"
INSUFFICIENT_PRIVILEGE = "42501"

# Postgres SQLSTATE -> HTTP status
_STATUS_BY_CODE: Dict[str, int] = {
    UNIQUE_VIOLATION: status.HTTP_409_CONFLICT,
    CHECK_VIOLATION: status.HTTP_400_BAD_REQUEST,
    FOREIGN_KEY_VIOLATION: status.HTTP_404_NOT_FOUND,
    INSUFFICIENT_PRIVILEGE: status.HTTP_403_FORBIDDEN,
}


def to_http_exception(exc: Exception, messages: Optional[Dict[str, str]] = None) -> HTTPException:
    """Map an exception raised while talking to Supabase onto an HTTPException.

    ``messages`` overrides the user-facing detail per SQLSTATE code, e.g.
    ``{UNIQUE_VIOLATION: "Already connected or request pending"}``.
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, APIError):
        code = exc.code or ""
        detail = (messages or {}).get(code) or exc.message or "Database request failed"
        status_code = _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        if status_code >= 500:
            logger.error("Supabase error %s: %s", code, exc.message)
        else:
            logger.info("Supabase constraint error %s: %s", code, exc.message)
        return HTTPException(status_code=status_code, detail=detail)
    logger.error("Backend request failed: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
