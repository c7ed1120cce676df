"""Tests for birth date and milestone age validation."""

from datetime import date, datetime, timedelta, timezone

from life_in_numbers.calculator import age_in_days, validate_birth_date, validate_milestone_age
from life_in_numbers.calculator.validation import (
    ERROR_BEFORE_1900,
    ERROR_FUTURE,
    ERROR_MISSING,
    ERROR_TOO_OLD,
    years_before,
)
from tests.conftest import NOW, coastal_profile


class TestValidateBirthDate:
    def test_valid(self):
        result = validate_birth_date(date(1990, 5, 17), NOW)
        assert result.is_valid
        assert result.error is None

    def test_missing(self):
        assert validate_birth_date(None, NOW).error == ERROR_MISSING

    def test_tomorrow_is_future(self):
        result = validate_birth_date(date(2026, 10, 20), NOW)
        assert not result.is_valid
        assert result.error == ERROR_FUTURE
        assert "future" in result.error

    def test_today_is_valid(self):
        assert validate_birth_date(date(2026, 10, 19), NOW).is_valid

    def test_older_than_150_years(self):
        result = validate_birth_date(date(1876, 10, 18), NOW)
        assert not result.is_valid
        assert result.error == ERROR_TOO_OLD
        assert "valid birth date" in result.error

    def test_exactly_150_years_hits_1900_floor(self):
        assert validate_birth_date(date(1876, 10, 19), NOW).error == ERROR_BEFORE_1900

    def test_before_1900(self):
        assert validate_birth_date(date(1899, 12, 31), NOW).error == ERROR_BEFORE_1900

    def test_1900_itself(self):
        assert validate_birth_date(date(1900, 1, 1), NOW).is_valid

    def test_timezone_aware_now(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        assert validate_birth_date(date(2026, 10, 20), now).error == ERROR_FUTURE
        assert validate_birth_date(date(2000, 1, 1), now).is_valid


class TestYearsBefore:
    def test_plain(self):
        assert years_before(date(2026, 10, 19), 150) == date(1876, 10, 19)

    def test_leap_day(self):
        assert years_before(date(2024, 2, 29), 1) == date(2023, 2, 28)


class TestAgeInDays:
    def test_whole_days(self):
        assert age_in_days(date(2006, 10, 19), NOW) == 7305

    def test_partial_day_floors(self):
        assert age_in_days(date(2026, 10, 19), NOW) == 0
        assert age_in_days(date(2026, 10, 18), NOW - timedelta(hours=13)) == 0


class TestValidateMilestoneAge:
    def test_in_range(self):
        assert validate_milestone_age("walking", 12).is_valid

    def test_bounds_inclusive(self):
        assert validate_milestone_age("walking", 9).is_valid
        assert validate_milestone_age("walking", 24).is_valid

    def test_too_early(self):
        result = validate_milestone_age("reading", 40)
        assert not result.is_valid
        assert result.error == "Too early - earliest typical age is 4 years"

    def test_too_late(self):
        result = validate_milestone_age("walking", 25)
        assert result.error == "Too late - latest typical age is 2 years"

    def test_unknown(self):
        result = validate_milestone_age("unicycling", 20)
        assert not result.is_valid
        assert result.error == "Unknown milestone"

    def test_profile_custom_milestone(self):
        assert validate_milestone_age("swimming", 48, profile=coastal_profile()).is_valid

    def test_profile_custom_milestone_bounds(self):
        result = validate_milestone_age("swimming", 24, profile=coastal_profile())
        assert result.error == "Too early - earliest typical age is 3 years"

    def test_custom_milestone_needs_its_profile(self):
        assert validate_milestone_age("swimming", 48).error == "Unknown milestone"
