"""Race calendar utility functions.

Deterministic, stateless helpers for plan start and week-count calculations.
"""

from datetime import date, timedelta

from loguru import logger

from marathon_trainer.plans.race.constants import MAX_PLAN_WEEKS, MIN_PLAN_WEEKS


def plan_start_date(today: date) -> date:
    """Plans always start the day after they are generated."""
    return today + timedelta(days=1)


def compute_weeks_until_race(race_date: date, start_date: date) -> int:
    """Count whole weeks between plan start and race day, clamped to the plan range.

    A race nearer than MIN_PLAN_WEEKS still gets a MIN_PLAN_WEEKS plan, which
    then runs past race day. That is logged, not rejected.

    Args:
        race_date: Race day
        start_date: First day of the plan

    Returns:
        Number of training weeks in [MIN_PLAN_WEEKS, MAX_PLAN_WEEKS]
    """
    raw_weeks = (race_date - start_date).days // 7
    weeks = max(MIN_PLAN_WEEKS, min(MAX_PLAN_WEEKS, raw_weeks))

    if raw_weeks < MIN_PLAN_WEEKS:
        logger.warning(
            f"Race on {race_date.isoformat()} is {raw_weeks} weeks out; "
            f"padding to {MIN_PLAN_WEEKS} weeks, plan extends past race day"
        )
    elif raw_weeks > MAX_PLAN_WEEKS:
        logger.info(f"Race is {raw_weeks} weeks out; capping plan at {MAX_PLAN_WEEKS} weeks")

    return weeks


def get_week_start_date(start_date: date, week_number: int) -> date:
    """Return the first day of week_number (1-indexed)."""
    return start_date + timedelta(weeks=week_number - 1)


def is_race_week(
    week_start: date,
    week_end: date,
    race_date: date | None,
) -> bool:
    """Check if the week range contains the race date.

    Args:
        week_start: Start date of the week
        week_end: End date of the week
        race_date: Race date or None

    Returns:
        True if the week contains the race date, False otherwise
    """
    if race_date is None:
        return False
    return week_start <= race_date <= week_end
