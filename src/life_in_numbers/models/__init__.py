"""Data models."""

from life_in_numbers.models.context import CalculationContext
from life_in_numbers.models.milestones import (
    CulturalProfile,
    CulturalVariation,
    DevelopmentalMilestone,
    LifePhase,
    MilestoneId,
    PersonalMilestone,
    milestone_key,
)
from life_in_numbers.models.stats import (
    DEFAULT_PARAMS,
    AdvancedLifeStats,
    ConfigurableParams,
    DevelopmentalContext,
    LifeStats,
)
from life_in_numbers.models.user_settings import UserSettings

__all__ = [
    "DEFAULT_PARAMS",
    "AdvancedLifeStats",
    "CalculationContext",
    "ConfigurableParams",
    "CulturalProfile",
    "CulturalVariation",
    "DevelopmentalContext",
    "DevelopmentalMilestone",
    "LifePhase",
    "LifeStats",
    "MilestoneId",
    "PersonalMilestone",
    "UserSettings",
    "milestone_key",
]
