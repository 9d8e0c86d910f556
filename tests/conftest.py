"""Root conftest for all tests.

Shared fixtures: a fixed generation date and runner payloads around it.
"""

from datetime import date, timedelta

import pytest

from marathon_trainer.plans.types import RunnerInput

TODAY = date(2026, 3, 2)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def plan_start(today: date) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def runner_payload(plan_start: date) -> dict:
    """Full marathon, 16 weeks out from plan start, progressive 30 → 40 km."""
    return {
        "raceType": "full",
        "currentPB": "4:30:00",
        "targetPB": "4:00:00",
        "raceDate": (plan_start + timedelta(weeks=16)).isoformat(),
        "weeklyFrequency": 5,
        "weeklyMileage": 40,
        "currentWeeklyMileage": 30,
        "distanceGrowthMode": "progressive",
    }


@pytest.fixture
def runner_input(runner_payload: dict) -> RunnerInput:
    return RunnerInput.model_validate(runner_payload)
