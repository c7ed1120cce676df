"""Input validation. Invalid input is reported as data, never raised."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from life_in_numbers.models import CulturalProfile, MilestoneId
from life_in_numbers.registry import Registry, get_registry

MIN_BIRTH_DATE = date(1900, 1, 1)
MAX_AGE_YEARS = 150

ERROR_MISSING = "Please enter your birth date"
ERROR_FUTURE = "Birth date cannot be in the future"
ERROR_TOO_OLD = "Please enter a valid birth date"
ERROR_BEFORE_1900 = "Birth date cannot be before 1900"
ERROR_UNKNOWN_MILESTONE = "Unknown milestone"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validity check."""

    is_valid: bool
    error: str | None = None


VALID = ValidationResult(is_valid=True)


def birth_datetime(birth_date: date, now: datetime) -> datetime:
    """Midnight of the birth date, in the same timezone as now."""
    return datetime.combine(birth_date, time.min, tzinfo=now.tzinfo)


def years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier. Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def validate_birth_date(birth_date: date | None, now: datetime | None = None) -> ValidationResult:
    """
    Check a birth date before calculating. Age is checked before the 1900 floor,
    so a date more than 150 calendar years back reports the generic reason.
    """
    if birth_date is None:
        return ValidationResult(is_valid=False, error=ERROR_MISSING)
    now = now or datetime.now()
    if birth_datetime(birth_date, now) > now:
        return ValidationResult(is_valid=False, error=ERROR_FUTURE)
    if birth_date < years_before(now.date(), MAX_AGE_YEARS):
        return ValidationResult(is_valid=False, error=ERROR_TOO_OLD)
    if birth_date < MIN_BIRTH_DATE:
        return ValidationResult(is_valid=False, error=ERROR_BEFORE_1900)
    return VALID


def validate_milestone_age(
    milestone_id: MilestoneId | str,
    age_months: int,
    registry: Registry | None = None,
    profile: CulturalProfile | None = None,
) -> ValidationResult:
    """
    Check a personal override against the milestone's realistic bounds.
    Custom milestones of the given profile take precedence over the registry.
    """
    milestone = profile.custom_milestone(milestone_id) if profile else None
    if milestone is None:
        milestone = (registry or get_registry()).get_milestone(milestone_id)
    if milestone is None:
        return ValidationResult(is_valid=False, error=ERROR_UNKNOWN_MILESTONE)
    if age_months < milestone.earliest_age_months:
        return ValidationResult(
            is_valid=False,
            error=f"Too early - earliest typical age is {milestone.earliest_age_months // 12} years",
        )
    if age_months > milestone.latest_age_months:
        return ValidationResult(
            is_valid=False,
            error=f"Too late - latest typical age is {milestone.latest_age_months // 12} years",
        )
    return VALID


def age_in_days(birth_date: date, now: datetime) -> int:
    """Whole days elapsed since midnight of the birth date."""
    return (now - birth_datetime(birth_date, now)) // timedelta(days=1)
