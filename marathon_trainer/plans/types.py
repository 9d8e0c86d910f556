"""Canonical training plan schema.

This module defines the plain records exchanged with the plan core:
- RunnerInput is what a caller submits
- TrainingPlan is what the generator returns
- Distances are kilometers, paces are "M:SS" per kilometer

JSON field names are camelCase; Python attributes are snake_case.
"""

from datetime import date as date_type
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RaceType = Literal["full", "half", "10k"]

# Session archetypes. "race" is a valid type but never scheduled by the generator.
SessionType = Literal["long", "easy", "tempo", "interval", "recovery", "race"]

DistanceGrowthMode = Literal["fixed", "progressive"]

RunnerLevel = Literal["beginner", "intermediate", "advanced", "elite"]


class RunnerInput(BaseModel):
    """Runner parameters for a single plan generation request.

    Attributes:
        race_type: Target race distance
        current_pb: Current personal best ("H:MM:SS" or "H:MM")
        target_pb: Goal time, must be faster than current_pb
        race_date: Race day
        weekly_frequency: Training sessions per week (3-7)
        weekly_mileage: Target weekly distance in km
        current_weekly_mileage: Optional starting weekly distance in km
        distance_growth_mode: How weekly distance evolves across the plan
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    race_type: RaceType = Field(..., alias="raceType")
    current_pb: str = Field(..., alias="currentPB")
    target_pb: str = Field(..., alias="targetPB")
    race_date: date_type = Field(..., alias="raceDate")
    weekly_frequency: int = Field(..., alias="weeklyFrequency", ge=3, le=7)
    weekly_mileage: float = Field(..., alias="weeklyMileage", gt=0, allow_inf_nan=False)
    current_weekly_mileage: float | None = Field(
        None, alias="currentWeeklyMileage", ge=0, allow_inf_nan=False
    )
    distance_growth_mode: DistanceGrowthMode = Field("fixed", alias="distanceGrowthMode")


class TrainingSession(BaseModel):
    """A single dated training session."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: date_type
    type: SessionType
    distance: float = Field(..., description="Distance in km, one decimal")
    pace: str = Field(..., description="Pace per km as M:SS")
    notes: str | None = None


class TrainingWeek(BaseModel):
    """One week of sessions, in chronological order."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    number: int = Field(..., ge=1, description="Week number (1-indexed)")
    total_distance: int = Field(..., alias="totalDistance", description="Rounded sum of session distances in km")
    sessions: list[TrainingSession] = Field(default_factory=list)


class TrainingPlan(RunnerInput):
    """Runner input plus the generated weeks."""

    weeks: list[TrainingWeek] = Field(default_factory=list)
