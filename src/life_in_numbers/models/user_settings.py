"""Persisted user settings."""

from datetime import date

from pydantic import BaseModel, Field

from life_in_numbers.models.milestones import PersonalMilestone
from life_in_numbers.models.stats import ConfigurableParams


class UserSettings(BaseModel):
    """What the settings store keeps per user."""

    birth_date: date | None = Field(default=None, description="Date of birth")
    params: ConfigurableParams = Field(default_factory=ConfigurableParams)
    personal_milestones: list[PersonalMilestone] = Field(default_factory=list)
    cultural_profile_id: str | None = Field(
        default=None,
        description="Selected cultural profile; the default profile when unset",
    )
