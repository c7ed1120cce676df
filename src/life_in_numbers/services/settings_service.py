"""Settings service - edit and reset a user's stored settings."""

import logging
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from life_in_numbers.calculator import validate_birth_date, validate_milestone_age
from life_in_numbers.models import ConfigurableParams, PersonalMilestone, UserSettings
from life_in_numbers.persistence import SettingsStore
from life_in_numbers.registry import Registry, get_registry
from life_in_numbers.services.stats_service import resolve_profile

logger = logging.getLogger(__name__)


class SettingsService:
    """Handles settings updates. Every change is validated before it is saved."""

    def __init__(
        self,
        settings_store: SettingsStore,
        registry: Registry | None = None,
    ) -> None:
        self._store = settings_store
        self._registry = registry or get_registry()

    def get_settings(self, user_key: str) -> UserSettings:
        """Stored settings, or defaults when nothing is stored yet."""
        return self._store.get(user_key) or UserSettings()

    def set_birth_date(
        self,
        user_key: str,
        birth_date: date,
        now: datetime | None = None,
    ) -> UserSettings | str:
        """Save a birth date. Returns updated settings or the validation error."""
        validation = validate_birth_date(birth_date, now)
        if not validation.is_valid:
            return validation.error or "Invalid birth date"
        settings = self.get_settings(user_key).model_copy(update={"birth_date": birth_date})
        self._store.save(user_key, settings)
        return settings

    def update_params(self, user_key: str, **changes: Any) -> UserSettings | str:
        """Merge parameter changes into the stored ones."""
        settings = self.get_settings(user_key)
        merged = {**settings.params.model_dump(), **changes}
        try:
            params = ConfigurableParams.model_validate(merged)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            return f"Invalid value for: {fields}"
        settings = settings.model_copy(update={"params": params})
        self._store.save(user_key, settings)
        return settings

    def update_personal_milestones(
        self,
        user_key: str,
        milestones: list[PersonalMilestone],
    ) -> UserSettings | str:
        """Replace personal milestone overrides. Out-of-range ages are rejected."""
        settings = self.get_settings(user_key)
        profile = resolve_profile(settings.cultural_profile_id, self._registry)
        for pm in milestones:
            if pm.personal_age_months is None:
                continue
            validation = validate_milestone_age(
                pm.milestone_id, pm.personal_age_months, self._registry, profile
            )
            if not validation.is_valid:
                milestone = profile.custom_milestone(pm.milestone_id) or self._registry.get_milestone(
                    pm.milestone_id
                )
                name = milestone.name if milestone else pm.milestone_id
                return f"{name}: {validation.error}"
        settings = settings.model_copy(update={"personal_milestones": list(milestones)})
        self._store.save(user_key, settings)
        return settings

    def set_cultural_profile(self, user_key: str, profile_id: str) -> UserSettings | str:
        if self._registry.get_profile(profile_id) is None:
            return f"Unknown cultural profile: {profile_id}"
        settings = self.get_settings(user_key).model_copy(update={"cultural_profile_id": profile_id})
        self._store.save(user_key, settings)
        return settings

    def reset_all(self, user_key: str) -> UserSettings:
        """Back to default params, milestones and profile. Keeps the birth date."""
        settings = UserSettings(birth_date=self.get_settings(user_key).birth_date)
        self._store.save(user_key, settings)
        return settings

    def clear_data(self, user_key: str) -> None:
        """Forget everything stored for the user."""
        self._store.delete(user_key)
        logger.info("Cleared settings for %s", user_key)
