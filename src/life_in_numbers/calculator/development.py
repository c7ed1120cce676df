"""Developmental context - current life phase and milestone timeline."""

from life_in_numbers.calculator.resolver import effective_milestones, resolve_start_age_months
from life_in_numbers.models import CalculationContext, DevelopmentalContext
from life_in_numbers.registry import Registry, get_registry

UNKNOWN_PHASE = "Unknown"
# How far ahead upcoming milestones are listed
UPCOMING_WINDOW_MONTHS = 60


def current_phase_name(age_in_months: int, registry: Registry | None = None) -> str:
    phase = (registry or get_registry()).phase_for(age_in_months)
    return phase.name if phase else UNKNOWN_PHASE


def build_developmental_context(
    age_in_months: int,
    context: CalculationContext,
    registry: Registry | None = None,
) -> DevelopmentalContext:
    """Phase plus milestones reached and those due within the next five years."""
    registry = registry or get_registry()
    achieved: list[str] = []
    upcoming: list[str] = []
    for milestone in effective_milestones(context, registry):
        start = resolve_start_age_months(milestone.id, context, registry)
        if start <= age_in_months:
            achieved.append(milestone.name)
        elif start <= age_in_months + UPCOMING_WINDOW_MONTHS:
            upcoming.append(milestone.name)
    return DevelopmentalContext(
        current_phase=current_phase_name(age_in_months, registry),
        milestones_achieved=achieved,
        upcoming_milestones=upcoming,
    )
