"""Week planner distribution logic - kilometers only.

This module turns a week's target distance into dated sessions:
- Session types follow a fixed canonical order, truncated to the weekly frequency
- The long run, when present, is pinned to the long-run curve and closes the week
- The remaining distance is shared by the other sessions, shaped 0.9 / 1.1 / 1.0
- Paces come from goal race pace via estimate_pace
"""

from datetime import date, timedelta

from marathon_trainer.plans.pace import estimate_pace
from marathon_trainer.plans.rounding import round_half_up
from marathon_trainer.plans.types import SessionType, TrainingSession

# Canonical session order. Only the first weekly_frequency entries are used,
# so the long run appears only at seven sessions per week.
SESSION_TYPE_ORDER: tuple[SessionType, ...] = (
    "easy",
    "easy",
    "tempo",
    "interval",
    "recovery",
    "easy",
    "long",
)

# Share multipliers for the first two non-long slots; later slots use 1.0
SLOT_DISTANCE_FACTORS: tuple[float, ...] = (0.9, 1.1)


def select_session_types(weekly_frequency: int) -> list[SessionType]:
    """Select session types for a week.

    Args:
        weekly_frequency: Sessions per week

    Returns:
        The first weekly_frequency entries of SESSION_TYPE_ORDER

    Raises:
        ValueError: If weekly_frequency is outside 1..len(SESSION_TYPE_ORDER)
    """
    if not 1 <= weekly_frequency <= len(SESSION_TYPE_ORDER):
        raise ValueError(
            f"Invalid weekly_frequency: {weekly_frequency}. Must be between 1 and {len(SESSION_TYPE_ORDER)}"
        )
    return list(SESSION_TYPE_ORDER[:weekly_frequency])


def allocate_session_distances(
    week_distance: float,
    session_types: list[SessionType],
    long_run_distance: float,
) -> list[float]:
    """Split a week's distance across its sessions.

    Args:
        week_distance: Week target distance in km
        session_types: Session types in week order
        long_run_distance: Distance pinned to the long run if the week has one

    Returns:
        Distances in km, one decimal, same order as session_types
    """
    has_long_run = "long" in session_types
    other_count = len(session_types) - (1 if has_long_run else 0)
    remaining = week_distance - (long_run_distance if has_long_run else 0)
    base_distance = remaining / other_count if other_count else 0.0

    distances: list[float] = []
    slot = 0
    for session_type in session_types:
        if session_type == "long":
            distances.append(long_run_distance)
            continue
        factor = SLOT_DISTANCE_FACTORS[slot] if slot < len(SLOT_DISTANCE_FACTORS) else 1.0
        distances.append(round_half_up(base_distance * factor, 1))
        slot += 1

    # Rounding drift goes to the last session in full
    difference = week_distance - sum(distances)
    if difference:
        distances[-1] = round_half_up(distances[-1] + difference, 1)

    return distances


def generate_week_sessions(
    session_types: list[SessionType],
    distances: list[float],
    target_pace_seconds: float,
    week_start_date: date,
) -> list[TrainingSession]:
    """Stamp dates and paces onto a week's sessions.

    Session i is dated week_start_date + i days.

    Args:
        session_types: Session types in week order
        distances: Distances matching session_types
        target_pace_seconds: Goal race pace in seconds per km
        week_start_date: First day of the week

    Returns:
        Sessions in chronological order
    """
    return [
        TrainingSession(
            date=week_start_date + timedelta(days=index),
            type=session_type,
            distance=distance,
            pace=estimate_pace(session_type, target_pace_seconds),
        )
        for index, (session_type, distance) in enumerate(zip(session_types, distances, strict=True))
    ]
