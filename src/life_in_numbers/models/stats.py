"""Behavioral parameters and computed statistics models."""

from pydantic import BaseModel, ConfigDict, Field


class ConfigurableParams(BaseModel):
    """Daily behavioral rates. All non-negative."""

    model_config = ConfigDict(frozen=True)

    sleep_hours_per_day: float = Field(default=8, ge=0)
    heart_rate_per_minute: float = Field(default=70, ge=0)
    steps_per_day: float = Field(default=7000, ge=0)
    cups_of_coffee_per_day: float = Field(default=2, ge=0)
    meals_per_day: float = Field(default=3, ge=0)
    breaths_per_minute: float = Field(default=16, ge=0)
    reading_speed_pages_per_hour: float = Field(default=50, ge=0)
    average_book_pages: float = Field(default=300, ge=0)
    average_movie_minutes: float = Field(default=120, ge=0)


DEFAULT_PARAMS = ConfigurableParams()


class LifeStats(BaseModel):
    """Lifetime totals, all non-negative integers."""

    days_lived: int
    hours_slept: int
    total_heartbeats: int
    breaths_taken: int
    meals_consumed: int
    steps_walked: int
    cups_of_coffee: int
    books_could_read: int
    movies_watched: int
    earth_distance_traveled: int = Field(..., description="km travelled around the sun")


class DevelopmentalContext(BaseModel):
    """Where a person currently is on the milestone timeline."""

    current_phase: str = "Unknown"
    milestones_achieved: list[str] = Field(default_factory=list)
    upcoming_milestones: list[str] = Field(default_factory=list)


class AdvancedLifeStats(LifeStats):
    """LifeStats plus years since each tracked milestone and developmental context."""

    years_walking: int
    years_driving: int
    years_reading: int
    years_coffee_consumption: int
    developmental_context: DevelopmentalContext

    def to_text(self) -> str:
        """Plain-text report, one stat per line."""
        from life_in_numbers.formatting import STAT_LABELS, format_number

        lines = ["*Life In Numbers*", ""]
        for stat_type, label in STAT_LABELS.items():
            lines.append(f"{label}: {format_number(getattr(self, stat_type))}")
        ctx = self.developmental_context
        lines.append("")
        lines.append(f"Life phase: {ctx.current_phase}")
        lines.append(f"Milestones reached: {', '.join(ctx.milestones_achieved) or 'none yet'}")
        if ctx.upcoming_milestones:
            lines.append(f"Coming up: {', '.join(ctx.upcoming_milestones)}")
        return "\n".join(lines)
