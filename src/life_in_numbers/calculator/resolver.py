"""Milestone resolver - effective onset age for a milestone in a given context."""

import logging

from life_in_numbers.models import CalculationContext, DevelopmentalMilestone, MilestoneId
from life_in_numbers.registry import Registry, get_registry

logger = logging.getLogger(__name__)


def find_milestone(
    milestone_id: MilestoneId | str,
    context: CalculationContext,
    registry: Registry | None = None,
) -> DevelopmentalMilestone | None:
    """Profile custom milestones shadow registry entries with the same id."""
    custom = context.cultural_profile.custom_milestone(milestone_id)
    if custom is not None:
        return custom
    return (registry or get_registry()).get_milestone(milestone_id)


def effective_milestones(
    context: CalculationContext,
    registry: Registry | None = None,
) -> list[DevelopmentalMilestone]:
    """Registry milestones in order, then custom milestones the registry lacks."""
    registry = registry or get_registry()
    profile = context.cultural_profile
    result = [profile.custom_milestone(m.id) or m for m in registry.milestones]
    result.extend(m for m in profile.custom_milestones if registry.get_milestone(m.id) is None)
    return result


def resolve_start_age_months(
    milestone_id: MilestoneId | str,
    context: CalculationContext,
    registry: Registry | None = None,
) -> int:
    """
    Age in months at which a milestone is reached.
    A personal override wins verbatim; otherwise the typical age shifted by the
    cultural adjustment, clamped to the milestone's realistic bounds.
    Unknown milestones start at birth.
    """
    personal = context.personal_milestone(milestone_id)
    if personal is not None and personal.personal_age_months is not None:
        return personal.personal_age_months

    milestone = find_milestone(milestone_id, context, registry)
    if milestone is None:
        logger.debug("Unknown milestone %s, assuming it starts at birth", milestone_id)
        return 0

    adjusted = milestone.typical_age_months + context.cultural_profile.adjustment_for(milestone.id)
    return max(milestone.earliest_age_months, min(milestone.latest_age_months, adjusted))


def years_since_milestone(
    milestone_id: MilestoneId | str,
    age_in_months: int,
    context: CalculationContext,
    registry: Registry | None = None,
) -> int:
    """Whole years since the milestone was reached, 0 if not yet reached."""
    start = resolve_start_age_months(milestone_id, context, registry)
    if age_in_months < start:
        return 0
    return (age_in_months - start) // 12
