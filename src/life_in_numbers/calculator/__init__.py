"""Milestone-aware life statistics calculator. Pure functions, no I/O."""

from life_in_numbers.calculator.accumulator import (
    Band,
    accumulate,
    books_read,
    cups_of_coffee,
    drinks_coffee,
    movies_watched,
    steps_walked,
)
from life_in_numbers.calculator.advanced import calculate_advanced_stats, calculate_life_stats
from life_in_numbers.calculator.basic import basic_stats
from life_in_numbers.calculator.development import build_developmental_context
from life_in_numbers.calculator.resolver import resolve_start_age_months, years_since_milestone
from life_in_numbers.calculator.validation import (
    ValidationResult,
    age_in_days,
    validate_birth_date,
    validate_milestone_age,
)

__all__ = [
    "Band",
    "ValidationResult",
    "accumulate",
    "age_in_days",
    "basic_stats",
    "books_read",
    "build_developmental_context",
    "calculate_advanced_stats",
    "calculate_life_stats",
    "cups_of_coffee",
    "drinks_coffee",
    "movies_watched",
    "resolve_start_age_months",
    "steps_walked",
    "validate_birth_date",
    "validate_milestone_age",
    "years_since_milestone",
]
