"""Stats service - loads settings, validates and calculates."""

import logging
from datetime import datetime

from life_in_numbers.calculator import calculate_advanced_stats, validate_birth_date
from life_in_numbers.config import get_settings
from life_in_numbers.models import AdvancedLifeStats, CalculationContext, CulturalProfile, UserSettings
from life_in_numbers.persistence import SettingsStore
from life_in_numbers.registry import Registry, get_registry

logger = logging.getLogger(__name__)

NO_SETTINGS_MESSAGE = "No settings found. Set your birth date to see your life in numbers."
NO_BIRTH_DATE_MESSAGE = "Please enter your birth date"


def resolve_profile(profile_id: str | None, registry: Registry | None = None) -> CulturalProfile:
    """Selected profile, else the configured default, else the first predefined one."""
    registry = registry or get_registry()
    for candidate in (profile_id, get_settings().default_cultural_profile):
        if not candidate:
            continue
        profile = registry.get_profile(candidate)
        if profile is not None:
            return profile
        logger.warning("Unknown cultural profile %s, falling back to default", candidate)
    return registry.default_profile


def build_context(settings: UserSettings, registry: Registry | None = None) -> CalculationContext:
    """Calculation input from stored settings. Requires a birth date."""
    if settings.birth_date is None:
        raise ValueError("settings have no birth date")
    return CalculationContext(
        birth_date=settings.birth_date,
        cultural_profile=resolve_profile(settings.cultural_profile_id, registry),
        personal_milestones=tuple(settings.personal_milestones),
        params=settings.params,
    )


class StatsService:
    """Orchestrates stats calculation. Separates storage from the pure calculator."""

    def __init__(
        self,
        settings_store: SettingsStore | None = None,
        registry: Registry | None = None,
    ) -> None:
        self._store = settings_store
        self._registry = registry or get_registry()

    def stats_for_settings(
        self,
        settings: UserSettings,
        now: datetime | None = None,
    ) -> AdvancedLifeStats | str:
        """Stats for the given settings, or the reason none are available."""
        if settings.birth_date is None:
            return NO_BIRTH_DATE_MESSAGE
        now = now or datetime.now()
        validation = validate_birth_date(settings.birth_date, now)
        if not validation.is_valid:
            logger.info("No stats for invalid birth date: %s", validation.error)
            return validation.error or "Invalid birth date"
        context = build_context(settings, self._registry)
        return calculate_advanced_stats(context, now, self._registry)

    def get_stats(
        self,
        user_key: str,
        now: datetime | None = None,
    ) -> AdvancedLifeStats | str:
        """
        Get stats for a stored user. Returns AdvancedLifeStats or a message
        explaining why no statistics are available.
        """
        if self._store is None:
            raise RuntimeError("StatsService needs a settings store to look up users")
        settings = self._store.get(user_key)
        if not settings:
            return NO_SETTINGS_MESSAGE
        return self.stats_for_settings(settings, now)
