import pytest
from fastapi import HTTPException
from postgrest.exceptions import APIError

from informatch.core.errors import to_http_exception, UNIQUE_VIOLATION


def api_error(code, message="boom"):
    return APIError({"message": message, "code": code})


@pytest.mark.parametrize("code,status_code", [
    ("23505", 409),
    ("23514", 400),
    ("23503", 404),
    ("42501", 403),
    ("XX000", 500),
])
def test_sqlstate_mapping(code, status_code):
    assert to_http_exception(api_error(code)).status_code == status_code


def test_custom_message_per_code():
    exc = to_http_exception(api_error(UNIQUE_VIOLATION), {UNIQUE_VIOLATION: "Already connected"})
    assert exc.detail == "Already connected"


def test_database_message_used_by_default():
    assert to_http_exception(api_error("23514", "violates check")).detail == "violates check"


def test_http_exception_passes_through():
    raised = HTTPException(status_code=418, detail="teapot")
    assert to_http_exception(raised) is raised


def test_unknown_exception_is_500():
    exc = to_http_exception(RuntimeError("connection reset"))
    assert exc.status_code == 500
    assert exc.detail == "connection reset"
