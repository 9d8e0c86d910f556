"""Fixed display labels for session types, race types and runner levels."""

from marathon_trainer.plans.race.constants import RUNNER_LEVEL_THRESHOLDS
from marathon_trainer.plans.types import RaceType, RunnerLevel, SessionType

TRAINING_TYPE_NAMES: dict[SessionType, str] = {
    "long": "长距离跑",
    "easy": "轻松跑",
    "tempo": "节奏跑",
    "interval": "间歇跑",
    "recovery": "恢复跑",
    "race": "比赛",
}

RACE_TYPE_NAMES: dict[RaceType, str] = {
    "full": "全程马拉松",
    "half": "半程马拉松",
    "10k": "10公里",
}

RUNNER_LEVEL_NAMES: dict[RunnerLevel, str] = {
    "beginner": "初学者",
    "intermediate": "中级跑者",
    "advanced": "高级跑者",
    "elite": "精英跑者",
}


def get_training_type_name(session_type: SessionType) -> str:
    return TRAINING_TYPE_NAMES[session_type]


def get_session_type_from_name(name: str) -> SessionType:
    """Reverse lookup of a session type from its label or its key.

    Raises:
        ValueError: If name matches neither
    """
    for session_type, label in TRAINING_TYPE_NAMES.items():
        if name in (label, session_type):
            return session_type
    raise ValueError(f"Unknown training type: {name}")


def get_race_type_name(race_type: RaceType) -> str:
    return RACE_TYPE_NAMES[race_type]


def get_runner_level(race_type: RaceType, pb_seconds: float) -> RunnerLevel:
    """Classify a runner from their PB.

    A PB at or above the beginner threshold is "beginner"; each faster
    threshold moves one level up, and anything below the last is "elite".
    """
    beginner, intermediate, advanced = RUNNER_LEVEL_THRESHOLDS[race_type]

    if pb_seconds >= beginner:
        return "beginner"
    if pb_seconds >= intermediate:
        return "intermediate"
    if pb_seconds >= advanced:
        return "advanced"
    return "elite"


def get_runner_level_name(race_type: RaceType, pb_seconds: float) -> str:
    return RUNNER_LEVEL_NAMES[get_runner_level(race_type, pb_seconds)]
