"""Milestone, life phase and cultural profile data models."""

from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class MilestoneId(str, Enum):
    """Milestones the calculator reads directly."""

    WALKING = "walking"
    COFFEE_CONSUMPTION = "coffee_consumption"
    READING = "reading"
    DRIVING = "driving"
    ALCOHOL_CONSUMPTION = "alcohol_consumption"
    SMARTPHONE_USAGE = "smartphone_usage"
    SOCIAL_MEDIA = "social_media"


def milestone_key(milestone_id: "MilestoneId | str") -> str:
    """Plain string key for mapping lookups."""
    if isinstance(milestone_id, MilestoneId):
        return milestone_id.value
    return milestone_id


class CulturalVariation(BaseModel):
    """Regional onset age for a milestone. Informational only."""

    model_config = ConfigDict(frozen=True)

    region: str
    typical_age_months: int = Field(..., ge=0)
    prevalence: float = Field(..., ge=0.0, le=1.0)
    notes: str | None = None


class DevelopmentalMilestone(BaseModel):
    """A life activity with a typical onset age and realistic bounds."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique key, e.g. walking")
    name: str
    description: str = ""
    typical_age_months: int = Field(..., ge=0)
    earliest_age_months: int = Field(..., ge=0)
    latest_age_months: int = Field(..., ge=0)
    cultural_variations: tuple[CulturalVariation, ...] = ()
    is_required: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> "DevelopmentalMilestone":
        if not self.earliest_age_months <= self.typical_age_months <= self.latest_age_months:
            raise ValueError(
                f"milestone {self.id}: expected earliest <= typical <= latest, got "
                f"{self.earliest_age_months} / {self.typical_age_months} / {self.latest_age_months}"
            )
        return self


class PersonalMilestone(BaseModel):
    """User-owned override for a milestone. Unknown ids are tolerated."""

    milestone_id: str
    personal_age_months: int | None = Field(default=None, ge=0)
    is_active: bool = True
    custom_start_date: date | None = None


class LifePhase(BaseModel):
    """Named age band, [start_age_months, end_age_months)."""

    model_config = ConfigDict(frozen=True)

    name: str
    start_age_months: int = Field(..., ge=0)
    end_age_months: int
    characteristics: tuple[str, ...] = ()
    typical_activities: tuple[str, ...] = ()

    def contains(self, age_months: int) -> bool:
        return self.start_age_months <= age_months < self.end_age_months


class CulturalProfile(BaseModel):
    """Regional adjustments to milestone onset ages and activity prevalence."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    region: str = ""
    milestone_adjustments: Mapping[str, int] = Field(default_factory=dict, validate_default=True)
    activity_prevalence: Mapping[str, float] = Field(default_factory=dict, validate_default=True)
    custom_milestones: tuple[DevelopmentalMilestone, ...] = ()

    @field_validator("milestone_adjustments", "activity_prevalence", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        # Profiles are shared through the cached registry
        return MappingProxyType(dict(value))

    @field_serializer("milestone_adjustments", "activity_prevalence")
    def _as_dict(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def adjustment_for(self, milestone_id: MilestoneId | str) -> int:
        """Signed month delta for a milestone, 0 when the profile has none."""
        return self.milestone_adjustments.get(milestone_key(milestone_id), 0)

    def prevalence_for(self, milestone_id: MilestoneId | str, default: float) -> float:
        return self.activity_prevalence.get(milestone_key(milestone_id), default)

    def custom_milestone(self, milestone_id: MilestoneId | str) -> DevelopmentalMilestone | None:
        key = milestone_key(milestone_id)
        for m in self.custom_milestones:
            if m.id == key:
                return m
        return None
