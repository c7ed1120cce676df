"""Redis-backed settings store for cloud deployment. Use when REDIS_URL is set."""

import json
import logging

from life_in_numbers.models import UserSettings
from life_in_numbers.persistence.settings_store import safe_key

logger = logging.getLogger(__name__)

KEY_PREFIX = "life_in_numbers"


class RedisSettingsStore:
    """Redis-backed settings store. One JSON string per user key."""

    def __init__(self, redis_url: str) -> None:
        self._redis_url = redis_url
        self._client = None

    def _get_client(self):
        """Lazy-init Redis client."""
        if self._client is None:
            import redis
            self._client = redis.from_url(
                self._redis_url,
                decode_responses=True,
            )
        return self._client

    def _key(self, user_key: str) -> str:
        return f"{KEY_PREFIX}:settings:{safe_key(user_key)}"

    def get(self, user_key: str) -> UserSettings | None:
        """Get settings, or None if missing or unreadable."""
        try:
            data = self._get_client().get(self._key(user_key))
            if not data:
                return None
            return UserSettings.model_validate(json.loads(data))
        except Exception as e:
            logger.warning("Redis settings get failed: %s", e)
            return None

    def save(self, user_key: str, settings: UserSettings) -> None:
        """Save settings, replacing any previous record."""
        try:
            self._get_client().set(self._key(user_key), json.dumps(settings.model_dump(mode="json")))
        except Exception as e:
            logger.error("Redis settings save failed: %s", e)
            raise

    def delete(self, user_key: str) -> None:
        try:
            self._get_client().delete(self._key(user_key))
        except Exception as e:
            logger.error("Redis settings delete failed: %s", e)
            raise
