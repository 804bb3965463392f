"""Profile Handlers - read and update a profile with vocabulary references checked.

Invariants:
    - Every method returns a tagged dict: {"status": "ok", ...} or
      {"status": "error", "error_code": ..., "message": ...}
    - update_profile cleans, validates, then asserts every referenced name
      before writing; any failure leaves the stored profile unchanged
    - Options list every defined entry, in store order, flagged when referenced

Design Decisions:
    - Form data is validated in full (insert shape, username included) and then
      applied as a partial update without the username
"""

import logging

from vocabulary.core.errors import VocabularyError
from vocabulary.core.selection_options import build_selection_options
from vocabulary.services.registry import Registry

logger = logging.getLogger(__name__)

CONTEXT_NAME = "profile_update"


class ProfileHandlers:
    """Profile page operations over an injected registry."""

    def __init__(self, registry: Registry):
        self.registry = registry

    async def get_profile(self, username: str) -> dict:
        try:
            profile = await self.registry.profiles.find_by_username(username)
        except VocabularyError as e:
            return e.to_result()
        return {"status": "ok", "profile": profile.model_dump(mode="json")}

    async def profile_options(self, username: str) -> dict:
        """Interest and favorite choices for a profile, with its selections flagged."""
        try:
            profile = await self.registry.profiles.find_by_username(username)
        except VocabularyError as e:
            return e.to_result()
        interests = await self.registry.interests.find_all().fetch()
        favorites = await self.registry.favorites.find_all().fetch()
        return {
            "status": "ok",
            "interests": build_selection_options(
                [i.name for i in interests], profile.interests,
            ),
            "favorites": build_selection_options(
                [f.name for f in favorites], profile.favorites,
            ),
        }

    async def update_profile(self, username: str, form_data: dict) -> dict:
        profiles = self.registry.profiles
        try:
            profile = await profiles.find_by_username(username)
        except VocabularyError as e:
            return e.to_result()

        schema = profiles.get_schema()
        context = schema.named_context(CONTEXT_NAME)
        clean_data = schema.clean({**form_data, "username": username})
        if not context.validate(clean_data):
            violations = context.validation_errors()
            logger.warning(
                f"Profile update rejected for '{username}'",
                extra={"entity_name": username, "error_code": "VALIDATION_ERROR"},
            )
            return {
                "status": "error",
                "error_code": "VALIDATION_ERROR",
                "message": "Invalid profile data",
                "violations": [v.to_dict() for v in violations],
            }

        clean_data.pop("username")
        try:
            await profiles.update(profile.id, clean_data)
        except VocabularyError as e:
            logger.warning(
                f"Profile update failed for '{username}': {e.message}",
                extra={"entity_name": username, "error_code": e.code},
            )
            return e.to_result()
        return {"status": "ok", "profile_id": str(profile.id)}
