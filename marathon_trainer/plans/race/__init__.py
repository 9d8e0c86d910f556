"""Race calendar constants and utilities."""

from marathon_trainer.plans.race.constants import (
    LONG_RUN_PERCENTAGES,
    MAX_PLAN_WEEKS,
    MIN_PLAN_WEEKS,
    PB_BOUNDS,
    RACE_DISTANCES_KM,
    RUNNER_LEVEL_THRESHOLDS,
)
from marathon_trainer.plans.race.utils import (
    compute_weeks_until_race,
    get_week_start_date,
    is_race_week,
    plan_start_date,
)

__all__ = [
    "LONG_RUN_PERCENTAGES",
    "MAX_PLAN_WEEKS",
    "MIN_PLAN_WEEKS",
    "PB_BOUNDS",
    "RACE_DISTANCES_KM",
    "RUNNER_LEVEL_THRESHOLDS",
    "compute_weeks_until_race",
    "get_week_start_date",
    "is_race_week",
    "plan_start_date",
]
