"""Life stats calculator - combines the basic, accumulated and milestone stats."""

import logging
import math
from datetime import date, datetime, timedelta

from life_in_numbers.calculator.accumulator import (
    books_read,
    cups_of_coffee,
    movies_watched,
    steps_walked,
)
from life_in_numbers.calculator.basic import age_in_months as months_from_days
from life_in_numbers.calculator.basic import basic_stats, earth_distance_km
from life_in_numbers.calculator.development import build_developmental_context
from life_in_numbers.calculator.resolver import years_since_milestone
from life_in_numbers.calculator.validation import age_in_days, birth_datetime
from life_in_numbers.models import (
    AdvancedLifeStats,
    CalculationContext,
    ConfigurableParams,
    LifeStats,
    MilestoneId,
)
from life_in_numbers.registry import Registry, get_registry

logger = logging.getLogger(__name__)

# Flat assumptions of the milestone-unaware model
SIMPLE_READING_HOURS_PER_DAY = 2
SIMPLE_MOVIES_PER_WEEK = 2


def calculate_advanced_stats(
    context: CalculationContext,
    now: datetime | None = None,
    registry: Registry | None = None,
) -> AdvancedLifeStats:
    """
    Full milestone-aware snapshot for a valid birth date.
    Callers validate the birth date first; see validate_birth_date.
    """
    now = now or datetime.now()
    registry = registry or get_registry()
    days = age_in_days(context.birth_date, now)
    months = months_from_days(days)
    logger.debug("Calculating stats: %d days, %d months", days, months)

    return AdvancedLifeStats(
        **basic_stats(days, context.params),
        steps_walked=steps_walked(days, months, context, registry),
        cups_of_coffee=cups_of_coffee(days, months, context, registry),
        books_could_read=books_read(days, months, context, registry),
        movies_watched=movies_watched(days, months),
        years_walking=years_since_milestone(MilestoneId.WALKING, months, context, registry),
        years_driving=years_since_milestone(MilestoneId.DRIVING, months, context, registry),
        years_reading=years_since_milestone(MilestoneId.READING, months, context, registry),
        years_coffee_consumption=years_since_milestone(
            MilestoneId.COFFEE_CONSUMPTION, months, context, registry
        ),
        developmental_context=build_developmental_context(months, context, registry),
    )


def calculate_life_stats(
    birth_date: date,
    params: ConfigurableParams,
    now: datetime | None = None,
) -> LifeStats:
    """Milestone-unaware totals: every activity at a flat rate from birth."""
    now = now or datetime.now()
    elapsed = now - birth_datetime(birth_date, now)
    days = elapsed // timedelta(days=1)
    minutes = elapsed // timedelta(minutes=1)

    books = 0
    if params.average_book_pages > 0 and params.reading_speed_pages_per_hour > 0:
        hours_per_book = params.average_book_pages / params.reading_speed_pages_per_hour
        books = math.floor(days * SIMPLE_READING_HOURS_PER_DAY / hours_per_book)

    return LifeStats(
        days_lived=days,
        hours_slept=math.floor(days * params.sleep_hours_per_day),
        total_heartbeats=math.floor(minutes * params.heart_rate_per_minute),
        breaths_taken=math.floor(minutes * params.breaths_per_minute),
        meals_consumed=math.floor(days * params.meals_per_day),
        steps_walked=math.floor(days * params.steps_per_day),
        cups_of_coffee=math.floor(days * params.cups_of_coffee_per_day),
        books_could_read=books,
        movies_watched=math.floor(days / 7 * SIMPLE_MOVIES_PER_WEEK),
        earth_distance_traveled=earth_distance_km(days),
    )
