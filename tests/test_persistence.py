"""Tests for the file and Redis settings stores."""

import json
from datetime import date

import pytest

from life_in_numbers.models import ConfigurableParams, PersonalMilestone, UserSettings
from life_in_numbers.persistence import RedisSettingsStore, SettingsStore, create_store
from tests.conftest import FakeRedis


def sample_settings() -> UserSettings:
    return UserSettings(
        birth_date=date(1990, 5, 17),
        params=ConfigurableParams(steps_per_day=9000),
        personal_milestones=[PersonalMilestone(milestone_id="walking", personal_age_months=11)],
        cultural_profile_id="nordic",
    )


class TestSettingsStore:
    def test_missing(self, tmp_path):
        assert SettingsStore(tmp_path).get("alice") is None

    def test_round_trip(self, tmp_path):
        store = SettingsStore(tmp_path)
        store.save("alice", sample_settings())
        assert store.get("alice") == sample_settings()

    def test_file_is_json(self, tmp_path):
        store = SettingsStore(tmp_path)
        store.save("alice", sample_settings())
        data = json.loads((tmp_path / "settings_alice.json").read_text())
        assert data["birth_date"] == "1990-05-17"
        assert data["params"]["steps_per_day"] == 9000

    def test_key_sanitised(self, tmp_path):
        store = SettingsStore(tmp_path)
        store.save("../../etc/passwd", sample_settings())
        assert (tmp_path / "settings_etcpasswd.json").exists()

    def test_corrupt_file_is_none(self, tmp_path):
        (tmp_path / "settings_bob.json").write_text("{not json")
        assert SettingsStore(tmp_path).get("bob") is None

    def test_invalid_data_is_none(self, tmp_path):
        (tmp_path / "settings_bob.json").write_text(json.dumps({"params": {"steps_per_day": -1}}))
        assert SettingsStore(tmp_path).get("bob") is None

    def test_delete(self, tmp_path):
        store = SettingsStore(tmp_path)
        store.save("alice", sample_settings())
        store.delete("alice")
        assert store.get("alice") is None
        store.delete("alice")

    def test_creates_data_dir(self, tmp_path):
        SettingsStore(tmp_path / "nested" / "dir")
        assert (tmp_path / "nested" / "dir").is_dir()


class TestRedisSettingsStore:
    def make_store(self, client: FakeRedis) -> RedisSettingsStore:
        store = RedisSettingsStore("redis://localhost:6379/0")
        store._client = client
        return store

    def test_round_trip(self):
        client = FakeRedis()
        store = self.make_store(client)
        store.save("alice", sample_settings())
        assert "life_in_numbers:settings:alice" in client.data
        assert store.get("alice") == sample_settings()

    def test_missing(self):
        assert self.make_store(FakeRedis()).get("alice") is None

    def test_delete(self):
        store = self.make_store(FakeRedis())
        store.save("alice", sample_settings())
        store.delete("alice")
        assert store.get("alice") is None

    def test_get_failure_is_none(self):
        assert self.make_store(FakeRedis(fail=True)).get("alice") is None

    def test_save_failure_raises(self):
        store = self.make_store(FakeRedis(fail=True))
        with pytest.raises(ConnectionError):
            store.save("alice", sample_settings())


class TestCreateStore:
    def test_file_store_by_default(self, tmp_path, monkeypatch):
        from life_in_numbers.config import Settings

        monkeypatch.setattr(
            "life_in_numbers.persistence.factory.get_settings",
            lambda: Settings(data_dir=tmp_path, redis_url=None),
        )
        store = create_store()
        assert isinstance(store, SettingsStore)
        assert store.data_dir == tmp_path

    def test_redis_when_url_set(self, monkeypatch):
        from life_in_numbers.config import Settings

        monkeypatch.setattr(
            "life_in_numbers.persistence.factory.get_settings",
            lambda: Settings(redis_url="redis://localhost:6379/0"),
        )
        assert isinstance(create_store(), RedisSettingsStore)
