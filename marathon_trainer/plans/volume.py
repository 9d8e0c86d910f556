"""Weekly volume curves - kilometers only.

Weekly target distance and the long run's share of it, both as functions
of the week's position in the plan.
"""

from marathon_trainer.plans.race.constants import LONG_RUN_PERCENTAGES
from marathon_trainer.plans.rounding import round_half_up
from marathon_trainer.plans.types import RaceType, RunnerInput, TrainingSession


def get_week_distance(runner_input: RunnerInput, week_number: int, total_weeks: int) -> float:
    """Target distance for a week, before it is split into sessions.

    Fixed mode, or a missing/zero baseline, keeps every week at the target.
    Progressive mode grows linearly from the baseline and never exceeds the target.

    Args:
        runner_input: Runner parameters
        week_number: Week number (1-indexed)
        total_weeks: Total weeks in the plan

    Returns:
        Week distance in km
    """
    target = runner_input.weekly_mileage
    baseline = runner_input.current_weekly_mileage

    if runner_input.distance_growth_mode == "fixed" or not baseline:
        return target

    growth_rate = (target - baseline) / total_weeks
    week_distance = baseline + growth_rate * week_number

    return min(round_half_up(week_distance), target)


def get_long_run_percentage(race_type: RaceType, week_number: int, total_weeks: int) -> float:
    """Long run share of the week, reaching its peak at the plan midpoint."""
    base, peak = LONG_RUN_PERCENTAGES[race_type]
    progress = week_number / total_weeks
    return base + (peak - base) * min(progress * 2, 1)


def get_long_run_distance(
    week_distance: float,
    race_type: RaceType,
    week_number: int,
    total_weeks: int,
) -> float:
    """Long run distance in km, one decimal."""
    percentage = get_long_run_percentage(race_type, week_number, total_weeks)
    return round_half_up(week_distance * percentage, 1)


def compute_weekly_volume_km(sessions: list[TrainingSession]) -> int:
    """Compute weekly volume as the rounded sum of session distances.

    Args:
        sessions: Sessions of one week

    Returns:
        Total volume in whole km
    """
    return int(round_half_up(sum(session.distance for session in sessions)))
