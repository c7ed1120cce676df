"""Display helpers - compact numbers and fun facts for computed stats."""

from datetime import datetime

from life_in_numbers.calculator.accumulator import MOVIE_START_AGE_MONTHS
from life_in_numbers.calculator.basic import DAYS_PER_YEAR, age_in_months
from life_in_numbers.calculator.resolver import resolve_start_age_months
from life_in_numbers.calculator.validation import age_in_days
from life_in_numbers.models import CalculationContext, MilestoneId
from life_in_numbers.registry import Registry

# Display order and titles
STAT_LABELS = {
    "days_lived": "Days Lived",
    "hours_slept": "Hours Slept",
    "total_heartbeats": "Heartbeats",
    "breaths_taken": "Breaths Taken",
    "meals_consumed": "Meals Consumed",
    "steps_walked": "Steps Walked",
    "cups_of_coffee": "Cups of Coffee",
    "books_could_read": "Books Could Read",
    "movies_watched": "Movies Watched",
    "earth_distance_traveled": "Distance with Earth (km)",
}

KM_PER_STEP = 0.0008
EARTH_CIRCUMFERENCE_KM = 40075


def format_number(num: int | float) -> str:
    """1.2B / 3.4M / 5.6K, or the plain number with thousands separators."""
    if num >= 1e9:
        return f"{num / 1e9:.1f}B"
    if num >= 1e6:
        return f"{num / 1e6:.1f}M"
    if num >= 1e3:
        return f"{num / 1e3:.1f}K"
    return f"{num:,}"


def _milestone_fact(
    stat_type: str,
    value: int,
    age_months: int,
    context: CalculationContext,
    registry: Registry | None,
) -> str | None:
    if stat_type == "steps_walked":
        start = resolve_start_age_months(MilestoneId.WALKING, context, registry)
        if age_months < start:
            return "You haven't started walking yet, but you will soon!"
        years = (age_months - start) // 12
        return f"You've been walking for {years} years and covered {int(value * KM_PER_STEP):,} km!"
    if stat_type == "cups_of_coffee":
        start = resolve_start_age_months(MilestoneId.COFFEE_CONSUMPTION, context, registry)
        if age_months < start:
            return "Coffee is still in your future - enjoy your sleep while you can!"
        if value == 0:
            return "You've skipped the coffee habit - your sleep schedule thanks you!"
        years = (age_months - start) // 12
        return f"{years} years of coffee has given you {value:,} cups of energy!"
    if stat_type == "books_could_read":
        start = resolve_start_age_months(MilestoneId.READING, context, registry)
        if age_months < start:
            return "Reading adventures await you in the coming years!"
        return f"Since learning to read, you could have built a library of {value:,} books!"
    if stat_type == "movies_watched":
        if age_months < MOVIE_START_AGE_MONTHS:
            return "Movie nights are coming soon in your future!"
        hours = int(value * context.params.average_movie_minutes / 60)
        return f"You've spent {hours:,} hours being entertained by movies!"
    return None


def generate_fun_fact(
    stat_type: str,
    value: int,
    context: CalculationContext,
    now: datetime | None = None,
    registry: Registry | None = None,
) -> str:
    """One sentence about a computed stat, aware of the person's milestones."""
    now = now or datetime.now()
    age_months = age_in_months(age_in_days(context.birth_date, now))
    fact = _milestone_fact(stat_type, value, age_months, context, registry)
    if fact:
        return fact

    if stat_type == "days_lived":
        return f"That's {int(value / DAYS_PER_YEAR)} years of amazing experiences!"
    if stat_type == "hours_slept":
        return f"You've spent {int(value / 24 / DAYS_PER_YEAR)} years dreaming!"
    if stat_type == "total_heartbeats":
        return f"Enough heartbeats to power a small city for {value // 100_000:,} days!"
    if stat_type == "breaths_taken":
        return f"You've inhaled enough air to fill {value // 1000:,} hot air balloons!"
    if stat_type == "meals_consumed":
        return f"That's enough food to feed a family of 4 for {value // (3 * 4 * 365)} years!"
    if stat_type == "earth_distance_traveled":
        laps = int(value / EARTH_CIRCUMFERENCE_KM)
        return f"You've traveled {value // 1_000_000:,} million km through space - {laps:,} laps of the Earth!"
    return f"What an incredible journey of {value:,}!"
