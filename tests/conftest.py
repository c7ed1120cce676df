"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest

from life_in_numbers.models import (
    CalculationContext,
    ConfigurableParams,
    CulturalProfile,
    DevelopmentalMilestone,
    PersonalMilestone,
)
from life_in_numbers.registry import Registry, get_registry

# Fixed clock: birth dates below are chosen relative to this instant
NOW = datetime(2026, 10, 19, 12, 0)
TWENTY_YEARS_AGO = date(2006, 10, 19)


# ---------------------------------------------------------------------------
# Fake Redis client (no real server needed)
# ---------------------------------------------------------------------------

class FakeRedis:
    """Minimal stand-in for a decode_responses=True redis client."""

    def __init__(self, fail: bool = False):
        self.data: dict[str, str] = {}
        self._fail = fail

    def _check(self):
        if self._fail:
            raise ConnectionError("redis unavailable")

    def get(self, key: str) -> Any:
        self._check()
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self._check()
        self.data[key] = value

    def delete(self, key: str) -> None:
        self._check()
        self.data.pop(key, None)


# ---------------------------------------------------------------------------
# Fixtures and helpers
# ---------------------------------------------------------------------------

@pytest.fixture()
def registry() -> Registry:
    return get_registry()


def make_context(
    birth_date: date = TWENTY_YEARS_AGO,
    profile_id: str = "western_developed",
    personal: list[PersonalMilestone] | None = None,
    profile: CulturalProfile | None = None,
    **params: float,
) -> CalculationContext:
    """Context with the default params unless overridden."""
    return CalculationContext(
        birth_date=birth_date,
        cultural_profile=profile or get_registry().get_profile(profile_id),
        personal_milestones=tuple(personal or []),
        params=ConfigurableParams(**params),
    )


@pytest.fixture()
def context() -> CalculationContext:
    return make_context()


def coastal_profile() -> CulturalProfile:
    """Profile that adds a swimming milestone the bundled registry lacks."""
    swimming = DevelopmentalMilestone(
        id="swimming",
        name="Swimming",
        typical_age_months=60,
        earliest_age_months=36,
        latest_age_months=120,
    )
    return CulturalProfile(id="coastal", name="Coastal", custom_milestones=(swimming,))
