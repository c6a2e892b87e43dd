import pytest
from fastapi.testclient import TestClient

from informatch.main import app
from informatch.database.supabase_client import get_supabase, get_service_supabase
from informatch.modules.auth.service import clear_auth_cache

from fake_supabase import FakeSupabase


@pytest.fixture
def fake():
    return FakeSupabase()


@pytest.fixture
def client(fake):
    clear_auth_cache()
    app.dependency_overrides[get_supabase] = lambda: fake
    app.dependency_overrides[get_service_supabase] = lambda: fake
    yield TestClient(app)
    app.dependency_overrides.clear()
    clear_auth_cache()


@pytest.fixture
def make_user(fake):
    """Create an auth user, its users row and (unless profile=False) a profile.

    Returns the Authorization headers for that user.
    """
    def _make_user(
        user_id,
        username=None,
        academic=None,
        non_academic=None,
        profile=True,
        is_private=False,
        show_age=True,
        show_bio=True,
        bio="Hello there",
    ):
        token = fake.add_auth_user(user_id)
        fake.insert_row("users", {
            "user_id": user_id,
            "user_email": f"{user_id}@uni.example",
            "user_priset_is_private": is_private,
            "user_priset_show_age": show_age,
            "user_priset_show_bio": show_bio,
        })
        if profile:
            fake.insert_row("profiles", {
                "user_id": user_id,
                "profile_username": username or user_id,
                "profile_bio": bio,
                "profile_birthdate": "2003-04-05",
                "profile_academic_interests": academic,
                "profile_non_academic_interests": non_academic,
                "profile_looking_for": "Study partner",
            })
        return {"Authorization": f"Bearer {token}"}

    return _make_user
