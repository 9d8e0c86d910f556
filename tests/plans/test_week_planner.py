"""Tests for session selection, distance allocation and date stamping."""

from datetime import timedelta

import pytest

from marathon_trainer.plans.week_planner import (
    SESSION_TYPE_ORDER,
    allocate_session_distances,
    generate_week_sessions,
    select_session_types,
)


def test_select_session_types_truncates_canonical_order():
    """Session types are a prefix of the canonical order."""
    assert select_session_types(3) == ["easy", "easy", "tempo"]
    assert select_session_types(5) == ["easy", "easy", "tempo", "interval", "recovery"]
    assert select_session_types(7) == list(SESSION_TYPE_ORDER)


@pytest.mark.parametrize("frequency", [3, 4, 5, 6])
def test_long_run_only_at_seven_sessions(frequency):
    """Below seven sessions there is no long run."""
    assert "long" not in select_session_types(frequency)


def test_select_session_types_rejects_out_of_range():
    """Frequencies outside 1..7 raise ValueError."""
    with pytest.raises(ValueError, match="weekly_frequency"):
        select_session_types(8)
    with pytest.raises(ValueError, match="weekly_frequency"):
        select_session_types(0)


def test_allocation_without_long_run_shapes_first_two_slots():
    """Without a long run the first two slots get 0.9 and 1.1 shares."""
    distances = allocate_session_distances(40, select_session_types(5), long_run_distance=12.5)
    assert distances == [7.2, 8.8, 8.0, 8.0, 8.0]


def test_allocation_pins_long_run_to_last_slot():
    """The long run keeps its pinned distance in the last slot."""
    distances = allocate_session_distances(40, select_session_types(7), long_run_distance=12.5)
    assert distances == [4.1, 5.0, 4.6, 4.6, 4.6, 4.6, 12.5]


def test_allocation_moves_rounding_drift_to_last_session():
    """11 km over 4 sessions rounds to 11.1 km; the last session absorbs -0.1."""
    distances = allocate_session_distances(11, select_session_types(4), long_run_distance=0)
    assert distances == [2.5, 3.0, 2.8, 2.7]
    assert sum(distances) == pytest.approx(11)


def test_generate_week_sessions_stamps_consecutive_dates(plan_start):
    """Session i is dated week start plus i days."""
    session_types = select_session_types(5)
    sessions = generate_week_sessions(session_types, [7.2, 8.8, 8.0, 8.0, 8.0], 300.0, plan_start)

    assert [s.date for s in sessions] == [plan_start + timedelta(days=i) for i in range(5)]
    assert [s.type for s in sessions] == session_types
    assert [s.pace for s in sessions] == ["6:00", "6:00", "5:15", "4:30", "6:30"]
    assert all(s.notes is None for s in sessions)


def test_generate_week_sessions_requires_matching_lengths(plan_start):
    """Types and distances must pair up one to one."""
    with pytest.raises(ValueError):
        generate_week_sessions(["easy", "easy"], [5.0], 300.0, plan_start)
