"""Tests for milestone start-age resolution."""

from life_in_numbers.calculator import resolve_start_age_months, years_since_milestone
from life_in_numbers.models import (
    CulturalProfile,
    DevelopmentalMilestone,
    MilestoneId,
    PersonalMilestone,
)
from tests.conftest import make_context


class TestResolveStartAge:
    def test_typical_age_without_adjustment(self):
        assert resolve_start_age_months(MilestoneId.WALKING, make_context()) == 15

    def test_plain_string_id(self):
        assert resolve_start_age_months("walking", make_context()) == 15

    def test_cultural_adjustment_applied(self):
        ctx = make_context()
        assert resolve_start_age_months(MilestoneId.COFFEE_CONSUMPTION, ctx) == 168
        assert resolve_start_age_months(MilestoneId.SMARTPHONE_USAGE, ctx) == 132

    def test_adjustment_clamped_to_latest(self):
        # 192 + 48 would exceed the 216 month ceiling
        ctx = make_context(profile_id="east_asian")
        assert resolve_start_age_months(MilestoneId.DRIVING, ctx) == 216

    def test_adjustment_clamped_to_earliest(self):
        profile = CulturalProfile(id="early", name="Early", milestone_adjustments={"walking": -100})
        ctx = make_context(profile=profile)
        assert resolve_start_age_months(MilestoneId.WALKING, ctx) == 9

    def test_adjustment_at_bound(self):
        ctx = make_context(profile_id="nordic")
        assert resolve_start_age_months(MilestoneId.COFFEE_CONSUMPTION, ctx) == 144

    def test_personal_override_wins(self):
        for profile_id in ("western_developed", "nordic", "east_asian", "middle_eastern"):
            ctx = make_context(
                profile_id=profile_id,
                personal=[PersonalMilestone(milestone_id="walking", personal_age_months=10)],
            )
            assert resolve_start_age_months(MilestoneId.WALKING, ctx) == 10

    def test_personal_override_not_clamped(self):
        ctx = make_context(personal=[PersonalMilestone(milestone_id="walking", personal_age_months=40)])
        assert resolve_start_age_months(MilestoneId.WALKING, ctx) == 40

    def test_personal_override_of_zero(self):
        ctx = make_context(personal=[PersonalMilestone(milestone_id="reading", personal_age_months=0)])
        assert resolve_start_age_months(MilestoneId.READING, ctx) == 0

    def test_personal_milestone_without_age_falls_through(self):
        ctx = make_context(personal=[PersonalMilestone(milestone_id="walking")])
        assert resolve_start_age_months(MilestoneId.WALKING, ctx) == 15

    def test_first_override_wins(self):
        ctx = make_context(
            personal=[
                PersonalMilestone(milestone_id="walking", personal_age_months=11),
                PersonalMilestone(milestone_id="walking", personal_age_months=20),
            ]
        )
        assert resolve_start_age_months(MilestoneId.WALKING, ctx) == 11

    def test_unknown_milestone_starts_at_birth(self):
        assert resolve_start_age_months("unicycling", make_context()) == 0

    def test_custom_milestone_from_profile(self):
        swimming = DevelopmentalMilestone(
            id="swimming",
            name="Swimming",
            typical_age_months=60,
            earliest_age_months=36,
            latest_age_months=120,
        )
        profile = CulturalProfile(
            id="coastal",
            name="Coastal",
            milestone_adjustments={"swimming": -30},
            custom_milestones=(swimming,),
        )
        assert resolve_start_age_months("swimming", make_context(profile=profile)) == 36


class TestYearsSinceMilestone:
    def test_not_reached(self):
        assert years_since_milestone(MilestoneId.DRIVING, 100, make_context()) == 0

    def test_just_reached(self):
        assert years_since_milestone(MilestoneId.DRIVING, 192, make_context()) == 0

    def test_whole_years(self):
        assert years_since_milestone(MilestoneId.WALKING, 239, make_context()) == 18
