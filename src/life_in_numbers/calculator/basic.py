"""Linear lifetime totals - age times rate."""

import math

from life_in_numbers.models import ConfigurableParams

DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.44
MINUTES_PER_DAY = 1440
# Earth's orbital travel
EARTH_KM_PER_YEAR = 940_000_000


def age_in_months(age_in_days: int) -> int:
    return math.floor(age_in_days / DAYS_PER_MONTH)


def earth_distance_km(age_in_days: float) -> int:
    return math.floor((age_in_days / DAYS_PER_YEAR) * EARTH_KM_PER_YEAR)


def basic_stats(age_in_days: int, params: ConfigurableParams) -> dict[str, int]:
    """Stats that accrue at a constant rate from birth."""
    minutes = age_in_days * MINUTES_PER_DAY
    return {
        "days_lived": age_in_days,
        "hours_slept": math.floor(age_in_days * params.sleep_hours_per_day),
        "total_heartbeats": math.floor(minutes * params.heart_rate_per_minute),
        "breaths_taken": math.floor(minutes * params.breaths_per_minute),
        "meals_consumed": math.floor(age_in_days * params.meals_per_day),
        "earth_distance_traveled": earth_distance_km(age_in_days),
    }
