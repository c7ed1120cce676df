"""Persistence layer."""

from life_in_numbers.persistence.factory import create_store
from life_in_numbers.persistence.redis_store import RedisSettingsStore
from life_in_numbers.persistence.settings_store import SettingsStore

__all__ = [
    "RedisSettingsStore",
    "SettingsStore",
    "create_store",
]
