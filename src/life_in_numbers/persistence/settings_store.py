"""User settings persistence - JSON file storage."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from life_in_numbers.models import UserSettings

logger = logging.getLogger(__name__)


def safe_key(user_key: str) -> str:
    """Keep only characters that are safe in file names and Redis keys."""
    return "".join(c for c in user_key if c.isalnum() or c in "-_")


class SettingsStore:
    """File-based settings store. One JSON file per user key."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path(self, user_key: str) -> Path:
        return self._data_dir / f"settings_{safe_key(user_key)}.json"

    def get(self, user_key: str) -> UserSettings | None:
        """Get settings, or None if missing or unreadable."""
        path = self._path(user_key)
        if not path.exists():
            return None
        try:
            with path.open() as f:
                data = json.load(f)
            return UserSettings.model_validate(data)
        except (json.JSONDecodeError, OSError, ValidationError) as e:
            logger.warning("Could not load settings %s: %s", path, e)
            return None

    def save(self, user_key: str, settings: UserSettings) -> None:
        """Save settings, replacing any previous record."""
        path = self._path(user_key)
        try:
            with path.open("w") as f:
                json.dump(settings.model_dump(mode="json"), f, indent=2)
            logger.info("Saved settings for %s", safe_key(user_key))
        except OSError as e:
            logger.error("Could not save settings %s: %s", path, e)
            raise

    def delete(self, user_key: str) -> None:
        """Remove stored settings. Missing records are ignored."""
        path = self._path(user_key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Could not delete settings %s: %s", path, e)
            raise
