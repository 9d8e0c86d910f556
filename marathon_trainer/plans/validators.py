"""Runner input validators with hard guardrails.

Enforces the invariants the generator relies on:
- All required fields are present
- PB times are plausible for the race distance
- Target PB is strictly faster than current PB
- Race day is in the future
- Weekly distances leave at least MIN_SESSION_KM per session

Malformed duration text surfaces as ComputationError, everything else as
ValidationError.
"""

from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from marathon_trainer.plans.duration import duration_to_seconds, seconds_to_clock
from marathon_trainer.plans.errors import ValidationError
from marathon_trainer.plans.race.constants import MIN_SESSION_KM, PB_BOUNDS
from marathon_trainer.plans.types import RaceType, RunnerInput

REQUIRED_FIELDS: tuple[str, ...] = (
    "raceType",
    "currentPB",
    "targetPB",
    "raceDate",
    "weeklyFrequency",
    "weeklyMileage",
)


def validate_required_fields(payload: dict[str, Any]) -> None:
    """Reject payloads missing any required field.

    Args:
        payload: Raw request body

    Raises:
        ValidationError: If a required field is absent, null, or empty
    """
    missing = [field for field in REQUIRED_FIELDS if payload.get(field) in (None, "")]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def validate_pb_within_bounds(race_type: RaceType, pb_seconds: int, label: str) -> None:
    """Check a PB against the plausible range for the race.

    Args:
        race_type: Race distance key
        pb_seconds: PB in seconds
        label: Field name used in the error message

    Raises:
        ValidationError: If pb_seconds is outside the inclusive bounds
    """
    min_text, max_text = PB_BOUNDS[race_type]
    min_seconds = duration_to_seconds(min_text)
    max_seconds = duration_to_seconds(max_text)

    if not min_seconds <= pb_seconds <= max_seconds:
        raise ValidationError(
            f"{label} for {race_type} must be between "
            f"{seconds_to_clock(min_seconds)} and {seconds_to_clock(max_seconds)}"
        )


def validate_mileage_floor(runner_input: RunnerInput) -> None:
    """Reject weekly distances too small to spread over the weekly sessions.

    A baseline of 0 means no baseline and is accepted.

    Raises:
        ValidationError: If weekly_mileage or a positive current_weekly_mileage
            is below weekly_frequency * MIN_SESSION_KM
    """
    floor_km = runner_input.weekly_frequency * MIN_SESSION_KM

    if runner_input.weekly_mileage < floor_km:
        raise ValidationError(
            f"weeklyMileage must be at least {floor_km:g} km for "
            f"{runner_input.weekly_frequency} sessions per week"
        )

    current = runner_input.current_weekly_mileage
    if current and current < floor_km:
        raise ValidationError(
            f"currentWeeklyMileage must be 0 or at least {floor_km:g} km for "
            f"{runner_input.weekly_frequency} sessions per week"
        )


def validate_runner_input(runner_input: RunnerInput, today: date) -> None:
    """Validate cross-field invariants of a runner input.

    Args:
        runner_input: Structurally valid runner input
        today: Date the plan is generated on

    Raises:
        ValidationError: If an invariant is violated
        ComputationError: If a PB is malformed
    """
    current_seconds = duration_to_seconds(runner_input.current_pb)
    target_seconds = duration_to_seconds(runner_input.target_pb)

    validate_pb_within_bounds(runner_input.race_type, current_seconds, "currentPB")
    validate_pb_within_bounds(runner_input.race_type, target_seconds, "targetPB")

    if target_seconds >= current_seconds:
        raise ValidationError("targetPB must be faster than currentPB")

    if runner_input.race_date <= today:
        raise ValidationError(f"raceDate must be after {today.isoformat()}")

    validate_mileage_floor(runner_input)


def parse_runner_input(payload: dict[str, Any], today: date) -> RunnerInput:
    """Turn a raw JSON-shaped payload into a validated RunnerInput.

    Args:
        payload: Request body with camelCase fields
        today: Date the plan is generated on

    Returns:
        Validated RunnerInput

    Raises:
        ValidationError: If the payload is rejected
        ComputationError: If a PB is malformed
    """
    validate_required_fields(payload)

    try:
        runner_input = RunnerInput.model_validate(payload)
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ValidationError(f"Invalid runner input: {details}") from e

    validate_runner_input(runner_input, today)
    return runner_input
