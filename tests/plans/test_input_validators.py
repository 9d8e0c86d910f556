"""Tests for runner input validation."""

from datetime import timedelta

import pytest

from marathon_trainer.plans.errors import ComputationError, ValidationError
from marathon_trainer.plans.validators import REQUIRED_FIELDS, parse_runner_input


def test_valid_payload_parses(runner_payload, today):
    """A complete camelCase payload becomes a RunnerInput."""
    runner_input = parse_runner_input(runner_payload, today=today)

    assert runner_input.race_type == "full"
    assert runner_input.weekly_frequency == 5
    assert runner_input.current_weekly_mileage == 30


def test_growth_mode_defaults_to_fixed(runner_payload, today):
    """Omitted growth mode and baseline default to fixed and None."""
    del runner_payload["distanceGrowthMode"]
    del runner_payload["currentWeeklyMileage"]

    runner_input = parse_runner_input(runner_payload, today=today)
    assert runner_input.distance_growth_mode == "fixed"
    assert runner_input.current_weekly_mileage is None


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field_is_rejected(runner_payload, today, field):
    """Each required field is checked before model validation."""
    del runner_payload[field]
    with pytest.raises(ValidationError, match=f"Missing required fields: {field}"):
        parse_runner_input(runner_payload, today=today)


def test_empty_required_fields_are_all_listed(runner_payload, today):
    """Empty strings count as missing and all are reported."""
    runner_payload["currentPB"] = ""
    runner_payload["raceDate"] = None
    with pytest.raises(ValidationError, match="currentPB, raceDate"):
        parse_runner_input(runner_payload, today=today)


@pytest.mark.parametrize("race_type,current_pb,target_pb", [
    ("full", "8:30:00", "7:30:00"),
    ("full", "2:30:00", "1:55:00"),
    ("half", "4:10:00", "3:50:00"),
    ("10k", "0:35:00", "0:29:00"),
])
def test_pb_outside_bounds_is_rejected(runner_payload, today, race_type, current_pb, target_pb):
    """PBs outside the race's plausible range are refused."""
    runner_payload.update(raceType=race_type, currentPB=current_pb, targetPB=target_pb)
    with pytest.raises(ValidationError, match="must be between"):
        parse_runner_input(runner_payload, today=today)


def test_pb_bounds_are_inclusive(runner_payload, today):
    """PBs exactly on the bounds are accepted."""
    runner_payload.update(raceType="10k", currentPB="2:00:00", targetPB="0:30:00")
    assert parse_runner_input(runner_payload, today=today).race_type == "10k"


def test_bound_message_names_range(runner_payload, today):
    """The bound error names the race and its H:MM range."""
    runner_payload.update(raceType="half", currentPB="4:10:00", targetPB="2:00:00")
    with pytest.raises(ValidationError, match="currentPB for half must be between 1:00 and 4:00"):
        parse_runner_input(runner_payload, today=today)


@pytest.mark.parametrize("target_pb", ["4:30:00", "4:45:00"])
def test_target_must_be_faster_than_current(runner_payload, today, target_pb):
    """Equal or slower targets are refused."""
    runner_payload["targetPB"] = target_pb
    with pytest.raises(ValidationError, match="targetPB must be faster than currentPB"):
        parse_runner_input(runner_payload, today=today)


@pytest.mark.parametrize("days", [0, -1, -30])
def test_race_date_must_be_in_future(runner_payload, today, days):
    """Race dates today or earlier are refused."""
    runner_payload["raceDate"] = (today + timedelta(days=days)).isoformat()
    with pytest.raises(ValidationError, match="raceDate must be after"):
        parse_runner_input(runner_payload, today=today)


def test_race_tomorrow_is_accepted(runner_payload, today):
    """The day after generation is a valid race date."""
    runner_payload["raceDate"] = (today + timedelta(days=1)).isoformat()
    assert parse_runner_input(runner_payload, today=today).race_date == today + timedelta(days=1)


@pytest.mark.parametrize("field,value", [
    ("weeklyFrequency", 2),
    ("weeklyFrequency", 8),
    ("weeklyMileage", 0),
    ("weeklyMileage", -10),
    ("currentWeeklyMileage", -1),
    ("raceType", "5k"),
    ("distanceGrowthMode", "exponential"),
    ("raceDate", "next spring"),
])
def test_model_constraints_surface_as_validation_error(runner_payload, today, field, value):
    """Pydantic field errors are wrapped into ValidationError."""
    runner_payload[field] = value
    with pytest.raises(ValidationError, match="Invalid runner input"):
        parse_runner_input(runner_payload, today=today)


def test_malformed_pb_is_computation_error(runner_payload, today):
    """Unparseable PB text raises ComputationError."""
    runner_payload["currentPB"] = "four thirty"
    with pytest.raises(ComputationError, match="Invalid duration"):
        parse_runner_input(runner_payload, today=today)


def test_short_pb_format_is_accepted(runner_payload, today):
    """H:MM PBs validate like H:MM:00."""
    runner_payload.update(currentPB="4:30", targetPB="4:00")
    assert parse_runner_input(runner_payload, today=today).target_pb == "4:00"


@pytest.mark.parametrize("field", ["weeklyMileage", "currentWeeklyMileage"])
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_mileage_is_rejected(runner_payload, today, field, value):
    """Infinity and NaN never reach the distance curves."""
    runner_payload[field] = value
    with pytest.raises(ValidationError, match="Invalid runner input"):
        parse_runner_input(runner_payload, today=today)


@pytest.mark.parametrize("frequency,mileage", [(5, 0.4), (5, 4.9), (3, 2.5), (7, 6.9)])
def test_weekly_mileage_below_one_km_per_session_is_rejected(runner_payload, today, frequency, mileage):
    """A week must leave at least one kilometer per session."""
    runner_payload.update(weeklyFrequency=frequency, weeklyMileage=mileage, distanceGrowthMode="fixed")
    with pytest.raises(ValidationError, match=f"weeklyMileage must be at least {frequency} km"):
        parse_runner_input(runner_payload, today=today)


def test_small_positive_baseline_is_rejected(runner_payload, today):
    """A baseline below one kilometer per session is refused."""
    runner_payload["currentWeeklyMileage"] = 2
    with pytest.raises(ValidationError, match="currentWeeklyMileage must be 0 or at least 5 km"):
        parse_runner_input(runner_payload, today=today)


def test_mileage_floor_boundaries_are_accepted(runner_payload, today):
    """Exactly one kilometer per session, and a zero baseline, are valid."""
    runner_payload.update(weeklyMileage=5, currentWeeklyMileage=0)
    runner_input = parse_runner_input(runner_payload, today=today)
    assert runner_input.weekly_mileage == 5
    assert runner_input.current_weekly_mileage == 0
