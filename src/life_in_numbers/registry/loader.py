"""Milestone registry - immutable reference tables loaded once from YAML."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from life_in_numbers.config import get_registry_data
from life_in_numbers.models import (
    CulturalProfile,
    DevelopmentalMilestone,
    LifePhase,
    MilestoneId,
    milestone_key,
)

logger = logging.getLogger(__name__)

# Life phases must cover at least this many months without gaps
PHASE_COVERAGE_MONTHS = 1200


class RegistryError(ValueError):
    """Reference data is missing or inconsistent."""


@dataclass(frozen=True)
class Registry:
    """Read-only milestone, life phase and cultural profile tables."""

    milestones: tuple[DevelopmentalMilestone, ...]
    life_phases: tuple[LifePhase, ...]
    cultural_profiles: tuple[CulturalProfile, ...]
    _milestones_by_id: Mapping[str, DevelopmentalMilestone] = field(init=False, repr=False, compare=False)
    _profiles_by_id: Mapping[str, CulturalProfile] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_milestones_by_id", MappingProxyType({m.id: m for m in self.milestones})
        )
        object.__setattr__(
            self, "_profiles_by_id", MappingProxyType({p.id: p for p in self.cultural_profiles})
        )

    def get_milestone(self, milestone_id: MilestoneId | str) -> DevelopmentalMilestone | None:
        return self._milestones_by_id.get(milestone_key(milestone_id))

    def get_profile(self, profile_id: str) -> CulturalProfile | None:
        return self._profiles_by_id.get(profile_id)

    @property
    def default_profile(self) -> CulturalProfile:
        """First predefined profile."""
        return self.cultural_profiles[0]

    def phase_for(self, age_months: int) -> LifePhase | None:
        """First phase whose [start, end) contains the age."""
        for phase in self.life_phases:
            if phase.contains(age_months):
                return phase
        return None


def _check_phases(phases: tuple[LifePhase, ...]) -> None:
    if not phases:
        raise RegistryError("registry defines no life phases")
    expected_start = 0
    for phase in phases:
        if phase.start_age_months != expected_start:
            raise RegistryError(
                f"life phase {phase.name!r} starts at {phase.start_age_months}, expected {expected_start}"
            )
        if phase.end_age_months <= phase.start_age_months:
            raise RegistryError(f"life phase {phase.name!r} is empty")
        expected_start = phase.end_age_months
    if expected_start < PHASE_COVERAGE_MONTHS:
        raise RegistryError(
            f"life phases end at {expected_start} months, must reach {PHASE_COVERAGE_MONTHS}"
        )


def build_registry(data: dict[str, Any]) -> Registry:
    """Validate raw registry data. Raises RegistryError on any inconsistency."""
    try:
        milestones = tuple(
            DevelopmentalMilestone.model_validate(m) for m in data.get("milestones", [])
        )
        phases = tuple(LifePhase.model_validate(p) for p in data.get("life_phases", []))
        profiles = tuple(
            CulturalProfile.model_validate(p) for p in data.get("cultural_profiles", [])
        )
    except ValidationError as e:
        raise RegistryError(f"invalid registry data: {e}") from e

    ids = [m.id for m in milestones]
    if len(ids) != len(set(ids)):
        raise RegistryError("duplicate milestone ids in registry")
    missing = [m.value for m in MilestoneId if m.value not in ids]
    if missing:
        raise RegistryError(f"registry is missing milestones: {', '.join(missing)}")
    if not profiles:
        raise RegistryError("registry defines no cultural profiles")
    if len({p.id for p in profiles}) != len(profiles):
        raise RegistryError("duplicate cultural profile ids in registry")
    _check_phases(phases)

    return Registry(milestones=milestones, life_phases=phases, cultural_profiles=profiles)


@lru_cache
def get_registry(registry_path_str: str = "") -> Registry:
    """Cached registry. Shared by every calculation."""
    registry = build_registry(get_registry_data(registry_path_str))
    logger.info(
        "Loaded registry: %d milestones, %d life phases, %d cultural profiles",
        len(registry.milestones),
        len(registry.life_phases),
        len(registry.cultural_profiles),
    )
    return registry
