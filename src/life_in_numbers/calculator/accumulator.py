"""
Phase-segmented accumulation.

Activities that start at a milestone age and ramp up by life stage are modelled
as a sequence of bands over the days elapsed since onset. Each band has a fixed
length and a daily rate; the last band is open-ended.
"""

import hashlib
import math
from dataclasses import dataclass
from datetime import date

from life_in_numbers.calculator.basic import DAYS_PER_MONTH
from life_in_numbers.calculator.resolver import resolve_start_age_months
from life_in_numbers.models import CalculationContext, MilestoneId
from life_in_numbers.registry import Registry


@dataclass(frozen=True)
class Band:
    """A stretch of `days` accruing `rate` units per day. days=None is unbounded."""

    days: float | None
    rate: float


# Multipliers of steps_per_day: toddler, child, teen/adult
STEP_BANDS = (Band(730, 0.3), Band(3285, 0.7), Band(None, 1.0))
# Reading hours per day
READING_BANDS = (Band(1825, 1.0), Band(2190, 1.5), Band(None, 2.0))
# Movies per week
MOVIE_BANDS = (Band(3285, 1.0), Band(2190, 2.0), Band(None, 1.5))

MOVIE_START_AGE_MONTHS = 36
DEFAULT_COFFEE_PREVALENCE = 0.85


def accumulate(elapsed_days: float, bands: tuple[Band, ...], scale: float = 1.0) -> float:
    """Sum of band_days * band_rate * scale, consuming elapsed days band by band."""
    remaining = max(elapsed_days, 0.0)
    total = 0.0
    for band in bands:
        if remaining <= 0:
            break
        used = remaining if band.days is None else min(remaining, band.days)
        total += used * band.rate * scale
        remaining -= used
    return total


def elapsed_since(start_age_months: int, age_in_days: int, age_in_months: int) -> float | None:
    """Days since onset, or None if the activity has not started yet."""
    if age_in_months < start_age_months:
        return None
    return max(age_in_days - start_age_months * DAYS_PER_MONTH, 0.0)


def steps_walked(
    age_in_days: int,
    age_in_months: int,
    context: CalculationContext,
    registry: Registry | None = None,
) -> int:
    start = resolve_start_age_months(MilestoneId.WALKING, context, registry)
    elapsed = elapsed_since(start, age_in_days, age_in_months)
    if elapsed is None:
        return 0
    return math.floor(accumulate(elapsed, STEP_BANDS, context.params.steps_per_day))


def books_read(
    age_in_days: int,
    age_in_months: int,
    context: CalculationContext,
    registry: Registry | None = None,
) -> int:
    """Books finished: reading hours over hours needed per book."""
    start = resolve_start_age_months(MilestoneId.READING, context, registry)
    elapsed = elapsed_since(start, age_in_days, age_in_months)
    params = context.params
    if elapsed is None or params.average_book_pages <= 0 or params.reading_speed_pages_per_hour <= 0:
        return 0
    hours_per_book = params.average_book_pages / params.reading_speed_pages_per_hour
    return math.floor(accumulate(elapsed, READING_BANDS) / hours_per_book)


def movies_watched(age_in_days: int, age_in_months: int) -> int:
    elapsed = elapsed_since(MOVIE_START_AGE_MONTHS, age_in_days, age_in_months)
    if elapsed is None:
        return 0
    return math.floor(accumulate(elapsed, MOVIE_BANDS, 1 / 7))


def trait_draw(birth_date: date, salt: str) -> float:
    """Stable pseudo-random number in [0, 1) for a person."""
    digest = hashlib.sha256(f"{birth_date.isoformat()}:{salt}".encode()).digest()
    return int.from_bytes(digest[:8], "big") / 2**64


def drinks_coffee(context: CalculationContext) -> bool:
    """
    Coffee drinking is a fixed trait. An explicit personal milestone decides;
    otherwise the person drinks coffee when their trait draw is below the
    profile's prevalence.
    """
    personal = context.personal_milestone(MilestoneId.COFFEE_CONSUMPTION)
    if personal is not None:
        return personal.is_active
    profile = context.cultural_profile
    prevalence = profile.prevalence_for(MilestoneId.COFFEE_CONSUMPTION, DEFAULT_COFFEE_PREVALENCE)
    return trait_draw(context.birth_date, profile.id) < prevalence


def cups_of_coffee(
    age_in_days: int,
    age_in_months: int,
    context: CalculationContext,
    registry: Registry | None = None,
) -> int:
    start = resolve_start_age_months(MilestoneId.COFFEE_CONSUMPTION, context, registry)
    elapsed = elapsed_since(start, age_in_days, age_in_months)
    if elapsed is None or not drinks_coffee(context):
        return 0
    return math.floor(elapsed * context.params.cups_of_coffee_per_day)
