"""Centralized pace estimation logic - single source of truth.

Every session pace is derived from the goal race pace: the target PB spread
over the race distance, scaled by a per-session-type multiplier.
"""

from marathon_trainer.plans.duration import duration_to_seconds, seconds_to_pace
from marathon_trainer.plans.race.constants import RACE_DISTANCES_KM
from marathon_trainer.plans.types import RaceType, SessionType

# Pace multipliers relative to goal race pace (race = 1.00)
# Multipliers > 1.00 = slower than race pace
# Multipliers < 1.00 = faster than race pace
PACE_MULTIPLIERS: dict[SessionType, float] = {
    "easy": 1.20,
    "long": 1.15,
    "tempo": 1.05,
    "interval": 0.90,
    "recovery": 1.30,
    "race": 1.00,
}


def get_target_pace_seconds(race_type: RaceType, target_pb: str) -> float:
    """Goal race pace in seconds per km.

    Args:
        race_type: Race distance key
        target_pb: Goal finish time ("H:MM:SS" or "H:MM")

    Returns:
        Seconds per kilometer at goal pace

    Raises:
        ComputationError: If target_pb is malformed
    """
    return duration_to_seconds(target_pb) / RACE_DISTANCES_KM[race_type]


def estimate_pace(session_type: str, target_pace_seconds: float) -> str:
    """Estimate session pace text from goal race pace.

    Args:
        session_type: Session type (must be in PACE_MULTIPLIERS)
        target_pace_seconds: Goal race pace in seconds per km

    Returns:
        Pace text "M:SS" per km

    Raises:
        ValueError: If session type is not recognized
    """
    if session_type not in PACE_MULTIPLIERS:
        raise ValueError(
            f"Unknown session type: {session_type}. Valid types: {list(PACE_MULTIPLIERS.keys())}"
        )

    return seconds_to_pace(target_pace_seconds * PACE_MULTIPLIERS[session_type])
