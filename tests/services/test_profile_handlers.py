"""Profile Handlers - tagged-result profile reads and updates.

Tests cover:
    - get_profile / profile_options for known and unknown users
    - update_profile: clean -> validate -> reference check -> write
    - Any failure leaves the stored profile unchanged
"""

import pytest

from vocabulary.services.profile_handlers import ProfileHandlers


@pytest.fixture
def handlers(seeded):
    return ProfileHandlers(seeded)


async def test_get_profile(handlers):
    result = await handlers.get_profile("johnson")
    assert result["status"] == "ok"
    assert result["profile"]["first_name"] == "Philip"
    assert result["profile"]["interests"] == ["Databases"]
    assert isinstance(result["profile"]["id"], str)


async def test_get_profile_unknown(handlers):
    result = await handlers.get_profile("nobody")
    assert result["status"] == "error"
    assert result["error_code"] == "NOT_FOUND"


async def test_profile_options(handlers):
    result = await handlers.profile_options("johnson")
    assert result["status"] == "ok"
    assert result["interests"] == [
        {"label": "Databases", "selected": True},
        {"label": "Software Engineering", "selected": False},
    ]
    assert result["favorites"] == [
        {"label": "Hiking", "selected": False},
        {"label": "Surfing", "selected": True},
    ]


async def test_update_profile(handlers, seeded):
    result = await handlers.update_profile("johnson", {
        "first_name": "  Phil ",
        "interests": ["Software Engineering", "Databases"],
        "favorites": "Hiking",
        "csrf_token": "ignored",
    })
    assert result["status"] == "ok"
    profile = await seeded.profiles.find_by_username("johnson")
    assert str(profile.id) == result["profile_id"]
    assert profile.first_name == "Phil"
    assert profile.last_name == "Johnson"
    assert profile.interests == ["Software Engineering", "Databases"]
    assert profile.favorites == ["Hiking"]


async def test_update_profile_validation_error(handlers, seeded):
    result = await handlers.update_profile("johnson", {"first_name": "x" * 101})
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert [v["field"] for v in result["violations"]] == ["first_name"]
    profile = await seeded.profiles.find_by_username("johnson")
    assert profile.first_name == "Philip"


async def test_update_profile_unknown_interest(handlers, seeded):
    result = await handlers.update_profile("johnson", {
        "first_name": "Phil", "interests": ["Databases", "Networks"],
    })
    assert result["status"] == "error"
    assert result["error_code"] == "NOT_FOUND"
    assert "Networks" in result["message"]
    profile = await seeded.profiles.find_by_username("johnson")
    assert profile.first_name == "Philip"
    assert profile.interests == ["Databases"]


async def test_update_profile_unknown_user(handlers):
    result = await handlers.update_profile("nobody", {"first_name": "X"})
    assert result["error_code"] == "NOT_FOUND"
