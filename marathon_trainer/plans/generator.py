"""Training plan generator.

Pure transformation from RunnerInput to TrainingPlan. Holds no state between
calls and performs no I/O besides logging.
"""

from datetime import date, timedelta
from typing import Any

from loguru import logger

from marathon_trainer.plans.pace import get_target_pace_seconds
from marathon_trainer.plans.race.utils import (
    compute_weeks_until_race,
    get_week_start_date,
    is_race_week,
    plan_start_date,
)
from marathon_trainer.plans.types import RunnerInput, TrainingPlan, TrainingSession, TrainingWeek
from marathon_trainer.plans.validators import parse_runner_input
from marathon_trainer.plans.volume import (
    compute_weekly_volume_km,
    get_long_run_distance,
    get_week_distance,
)
from marathon_trainer.plans.week_planner import (
    allocate_session_distances,
    generate_week_sessions,
    select_session_types,
)

RACE_DAY_NOTE = "Race day"


def _mark_race_day(sessions: list[TrainingSession], race_date: date) -> list[TrainingSession]:
    return [
        session.model_copy(update={"notes": RACE_DAY_NOTE}) if session.date == race_date else session
        for session in sessions
    ]


def build_training_week(
    runner_input: RunnerInput,
    week_number: int,
    total_weeks: int,
    week_start_date: date,
    target_pace_seconds: float,
) -> TrainingWeek:
    """Build a single week of the plan.

    Args:
        runner_input: Runner parameters
        week_number: Week number (1-indexed)
        total_weeks: Total weeks in the plan
        week_start_date: First day of the week
        target_pace_seconds: Goal race pace in seconds per km

    Returns:
        TrainingWeek with dated sessions and rounded total
    """
    week_distance = get_week_distance(runner_input, week_number, total_weeks)
    long_run_distance = get_long_run_distance(
        week_distance, runner_input.race_type, week_number, total_weeks
    )
    session_types = select_session_types(runner_input.weekly_frequency)
    distances = allocate_session_distances(week_distance, session_types, long_run_distance)
    sessions = generate_week_sessions(session_types, distances, target_pace_seconds, week_start_date)

    week_end_date = week_start_date + timedelta(days=6)
    if is_race_week(week_start_date, week_end_date, runner_input.race_date):
        sessions = _mark_race_day(sessions, runner_input.race_date)

    total_distance = compute_weekly_volume_km(sessions)
    logger.debug(
        f"Week {week_number}/{total_weeks}: target={week_distance}km "
        f"total={total_distance}km sessions={len(sessions)}"
    )

    return TrainingWeek(number=week_number, total_distance=total_distance, sessions=sessions)


def generate_training_plan(runner_input: RunnerInput, today: date | None = None) -> TrainingPlan:
    """Generate a complete training plan.

    The plan starts the day after `today` and has between MIN_PLAN_WEEKS and
    MAX_PLAN_WEEKS weeks regardless of how near or far the race is.

    Args:
        runner_input: Validated runner parameters
        today: Generation date (defaults to the current local date)

    Returns:
        TrainingPlan carrying the input fields and the generated weeks

    Raises:
        ComputationError: If target_pb is malformed
    """
    today = today or date.today()
    start_date = plan_start_date(today)
    total_weeks = compute_weeks_until_race(runner_input.race_date, start_date)
    target_pace_seconds = get_target_pace_seconds(runner_input.race_type, runner_input.target_pb)

    weeks = [
        build_training_week(
            runner_input,
            week_number,
            total_weeks,
            get_week_start_date(start_date, week_number),
            target_pace_seconds,
        )
        for week_number in range(1, total_weeks + 1)
    ]

    logger.info(
        f"Generated {runner_input.race_type} plan: weeks={total_weeks} "
        f"frequency={runner_input.weekly_frequency} mode={runner_input.distance_growth_mode} "
        f"start={start_date.isoformat()}"
    )

    return TrainingPlan(**runner_input.model_dump(), weeks=weeks)


def generate_training_plan_from_payload(payload: dict[str, Any], today: date | None = None) -> TrainingPlan:
    """Validate a raw JSON-shaped payload and generate its plan.

    Args:
        payload: Request body with camelCase RunnerInput fields
        today: Generation date (defaults to the current local date)

    Returns:
        Generated TrainingPlan

    Raises:
        ValidationError: If the payload is rejected
        ComputationError: If a duration cannot be parsed
    """
    today = today or date.today()
    runner_input = parse_runner_input(payload, today=today)
    return generate_training_plan(runner_input, today=today)
