"""Race constants - single source of truth.

This module defines the static lookup tables keyed by race type.
All race-dependent logic must import from here.
"""

from marathon_trainer.plans.types import RaceType

MIN_PLAN_WEEKS = 8
MAX_PLAN_WEEKS = 24

RACE_DISTANCES_KM: dict[RaceType, float] = {
    "full": 42.195,
    "half": 21.0975,
    "10k": 10.0,
}

# (base, peak) share of the weekly distance given to the long run
LONG_RUN_PERCENTAGES: dict[RaceType, tuple[float, float]] = {
    "full": (0.30, 0.40),
    "half": (0.35, 0.50),
    "10k": (0.40, 0.60),
}

# Plausible PB range per race, inclusive
PB_BOUNDS: dict[RaceType, tuple[str, str]] = {
    "full": ("2:00:00", "8:00:00"),
    "half": ("1:00:00", "4:00:00"),
    "10k": ("0:30:00", "2:00:00"),
}

# PB at or above each threshold (seconds) places the runner at that level
RUNNER_LEVEL_THRESHOLDS: dict[RaceType, tuple[float, float, float]] = {
    "full": (4.5 * 3600, 3.5 * 3600, 3 * 3600),
    "half": (2.25 * 3600, 1.75 * 3600, 1.5 * 3600),
    "10k": (1 * 3600, 0.75 * 3600, 0.6 * 3600),
}

# Lowest weekly distance per scheduled session, in km
MIN_SESSION_KM = 1.0
