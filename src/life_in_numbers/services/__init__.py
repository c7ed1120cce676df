"""Business logic services."""

from life_in_numbers.services.settings_service import SettingsService
from life_in_numbers.services.stats_service import StatsService, build_context, resolve_profile

__all__ = ["SettingsService", "StatsService", "build_context", "resolve_profile"]
