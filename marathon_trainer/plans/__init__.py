"""Plans module - deterministic training plan generation.

This module provides:
- Runner input and training plan records
- Duration and pace conversion
- Weekly distance and long-run curves
- Week planning and full plan assembly

The generator is a pure function: RunnerInput in, TrainingPlan out.
"""

from marathon_trainer.plans.duration import duration_to_seconds, seconds_to_clock, seconds_to_pace
from marathon_trainer.plans.errors import (
    ComputationError,
    PlanError,
    PlanExportError,
    PlanStoreError,
    ValidationError,
)
from marathon_trainer.plans.generator import generate_training_plan, generate_training_plan_from_payload
from marathon_trainer.plans.labels import get_runner_level_name, get_training_type_name
from marathon_trainer.plans.pace import estimate_pace, get_target_pace_seconds
from marathon_trainer.plans.types import RunnerInput, TrainingPlan, TrainingSession, TrainingWeek
from marathon_trainer.plans.validators import parse_runner_input, validate_runner_input

__all__ = [
    "ComputationError",
    "PlanError",
    "PlanExportError",
    "PlanStoreError",
    "RunnerInput",
    "TrainingPlan",
    "TrainingSession",
    "TrainingWeek",
    "ValidationError",
    "duration_to_seconds",
    "estimate_pace",
    "generate_training_plan",
    "generate_training_plan_from_payload",
    "get_runner_level_name",
    "get_target_pace_seconds",
    "get_training_type_name",
    "parse_runner_input",
    "seconds_to_clock",
    "seconds_to_pace",
    "validate_runner_input",
]
