"""Run with: python -m life_in_numbers 1990-05-17"""

import argparse
import json
import logging
import sys
from datetime import date, datetime

from life_in_numbers.calculator import validate_birth_date, validate_milestone_age
from life_in_numbers.config import get_settings
from life_in_numbers.formatting import STAT_LABELS, generate_fun_fact
from life_in_numbers.models import ConfigurableParams, CulturalProfile, PersonalMilestone, UserSettings
from life_in_numbers.persistence import create_store
from life_in_numbers.registry import get_registry
from life_in_numbers.services import StatsService, build_context


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value}")


def _parse_milestone(value: str) -> PersonalMilestone:
    """id=months, or id=off to mark an activity as not practised."""
    milestone_id, sep, months = value.partition("=")
    if not sep or not milestone_id:
        raise argparse.ArgumentTypeError(f"expected id=months, got {value}")
    if months.lower() == "off":
        return PersonalMilestone(milestone_id=milestone_id, is_active=False)
    if not months.isdigit():
        raise argparse.ArgumentTypeError(f"months must be a whole number, got {months}")
    return PersonalMilestone(milestone_id=milestone_id, personal_age_months=int(months))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="life_in_numbers",
        description="Your life in numbers: heartbeats, steps, books and more since you were born.",
    )
    parser.add_argument("birth_date", nargs="?", type=_parse_date, help="Birth date, YYYY-MM-DD")
    parser.add_argument("--profile", help="Cultural profile id (see --list-profiles)")
    parser.add_argument(
        "--milestone",
        action="append",
        type=_parse_milestone,
        default=[],
        metavar="ID=MONTHS",
        help="Personal milestone age, e.g. walking=11 or coffee_consumption=off",
    )
    for name, field in ConfigurableParams.model_fields.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            type=float,
            help=f"default {field.default:g}",
        )
    parser.add_argument("--user", help="Load (or with a birth date, save) settings under this key")
    parser.add_argument("--facts", action="store_true", help="Add a fun fact for each stat")
    parser.add_argument("--json", action="store_true", help="Print stats as JSON")
    parser.add_argument("--list-profiles", action="store_true")
    parser.add_argument("--list-milestones", action="store_true")
    return parser


def _list_registry(args: argparse.Namespace) -> None:
    registry = get_registry()
    if args.list_profiles:
        for p in registry.cultural_profiles:
            print(f"{p.id}: {p.name} ({p.region})")
    if args.list_milestones:
        for m in registry.milestones:
            print(
                f"{m.id}: {m.name}, typically {m.typical_age_months} months "
                f"({m.earliest_age_months}-{m.latest_age_months})"
            )


def _settings_from_args(args: argparse.Namespace) -> UserSettings:
    overrides = {
        name: getattr(args, name)
        for name in ConfigurableParams.model_fields
        if getattr(args, name) is not None
    }
    return UserSettings(
        birth_date=args.birth_date,
        params=ConfigurableParams(**overrides),
        personal_milestones=args.milestone,
        cultural_profile_id=args.profile,
    )


def _milestone_error(
    milestones: list[PersonalMilestone],
    profile: CulturalProfile | None,
) -> str | None:
    for pm in milestones:
        if pm.personal_age_months is None:
            continue
        validation = validate_milestone_age(pm.milestone_id, pm.personal_age_months, profile=profile)
        if not validation.is_valid:
            return f"{pm.milestone_id}: {validation.error}"
    return None


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_profiles or args.list_milestones:
        _list_registry(args)
        return 0
    if args.birth_date is None and not args.user:
        parser.error("a birth date or --user is required")

    now = datetime.now()
    # Plain calculations stay in memory, only --user touches the store
    store = create_store() if args.user else None
    stats_service = StatsService(store)

    if args.birth_date is None:
        user_settings = store.get(args.user)
        result = stats_service.get_stats(args.user, now)
    else:
        validation = validate_birth_date(args.birth_date, now)
        if not validation.is_valid:
            print(validation.error, file=sys.stderr)
            return 1
        profile = None
        if args.profile:
            profile = get_registry().get_profile(args.profile)
            if profile is None:
                print(f"Unknown cultural profile: {args.profile}", file=sys.stderr)
                return 1
        try:
            user_settings = _settings_from_args(args)
        except ValueError as e:
            print(f"Invalid parameter: {e}", file=sys.stderr)
            return 1
        error = _milestone_error(user_settings.personal_milestones, profile)
        if error:
            print(error, file=sys.stderr)
            return 1
        if store is not None:
            store.save(args.user, user_settings)
        result = stats_service.stats_for_settings(user_settings, now)

    if isinstance(result, str):
        print(result, file=sys.stderr)
        return 1

    facts: dict[str, str] = {}
    if args.facts and user_settings is not None:
        context = build_context(user_settings)
        facts = {
            stat: generate_fun_fact(stat, getattr(result, stat), context, now)
            for stat in STAT_LABELS
        }

    if args.json:
        payload = result.model_dump()
        if facts:
            payload["fun_facts"] = facts
        print(json.dumps(payload, indent=2))
    else:
        print(result.to_text())
        if facts:
            print("")
            for fact in facts.values():
                print(f"- {fact}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
