"""Calculation input bundle."""

from dataclasses import dataclass, field
from datetime import date

from life_in_numbers.models.milestones import CulturalProfile, MilestoneId, PersonalMilestone, milestone_key
from life_in_numbers.models.stats import DEFAULT_PARAMS, ConfigurableParams


@dataclass(frozen=True)
class CalculationContext:
    """Everything the calculator reads. Rebuilt whenever any part changes."""

    birth_date: date
    cultural_profile: CulturalProfile
    personal_milestones: tuple[PersonalMilestone, ...] = ()
    params: ConfigurableParams = field(default=DEFAULT_PARAMS)

    def personal_milestone(self, milestone_id: MilestoneId | str) -> PersonalMilestone | None:
        """First personal override for a milestone, if any."""
        key = milestone_key(milestone_id)
        for pm in self.personal_milestones:
            if pm.milestone_id == key:
                return pm
        return None
