"""Tests for goal-pace anchored session paces."""

import pytest

from marathon_trainer.plans.errors import ComputationError
from marathon_trainer.plans.pace import PACE_MULTIPLIERS, estimate_pace, get_target_pace_seconds


def test_target_pace_full_marathon():
    """Goal pace is target seconds over marathon distance."""
    pace = get_target_pace_seconds("full", "4:00:00")
    assert pace == pytest.approx(14400 / 42.195)
    assert estimate_pace("race", pace) == "5:41"


def test_target_pace_half_and_10k():
    """Half and 10k use their own race distances."""
    assert get_target_pace_seconds("half", "2:00:00") == pytest.approx(7200 / 21.0975)
    assert get_target_pace_seconds("10k", "0:50:00") == pytest.approx(300.0)


def test_session_paces_for_10k():
    """At 5:00/km goal pace every multiplier is easy to check by hand."""
    assert estimate_pace("easy", 300.0) == "6:00"
    assert estimate_pace("long", 300.0) == "5:45"
    assert estimate_pace("tempo", 300.0) == "5:15"
    assert estimate_pace("interval", 300.0) == "4:30"
    assert estimate_pace("recovery", 300.0) == "6:30"
    assert estimate_pace("race", 300.0) == "5:00"


def test_tempo_pace_full_marathon():
    """A 4:00:00 marathon gives a 5:58 tempo pace."""
    pace = get_target_pace_seconds("full", "4:00:00")
    assert estimate_pace("tempo", pace) == "5:58"


def test_interval_is_only_multiplier_faster_than_race():
    """Only intervals run faster than goal pace."""
    faster = [session_type for session_type, multiplier in PACE_MULTIPLIERS.items() if multiplier < 1.0]
    assert faster == ["interval"]


def test_estimate_pace_unknown_type():
    """Unknown session types raise ValueError."""
    with pytest.raises(ValueError, match="Unknown session type"):
        estimate_pace("fartlek", 300.0)


def test_target_pace_rejects_malformed_pb():
    """A malformed target PB raises ComputationError."""
    with pytest.raises(ComputationError):
        get_target_pace_seconds("full", "four hours")
