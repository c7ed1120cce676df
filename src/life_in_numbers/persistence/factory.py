"""Store factory - creates a file or Redis store based on config."""

from pathlib import Path

from life_in_numbers.config import get_settings
from life_in_numbers.persistence.redis_store import RedisSettingsStore
from life_in_numbers.persistence.settings_store import SettingsStore


def create_store() -> SettingsStore | RedisSettingsStore:
    """
    Create the settings store based on REDIS_URL.
    Uses Redis when REDIS_URL is set; otherwise file-based under DATA_DIR.
    """
    settings = get_settings()
    if settings.redis_url:
        return RedisSettingsStore(settings.redis_url)
    return SettingsStore(Path(settings.data_dir))
