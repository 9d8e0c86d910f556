"""Duration and pace text conversion.

Durations are entered as "H:MM:SS" or "H:MM". Paces are rendered as
"M:SS" per kilometer.
"""

import math
import re

from marathon_trainer.plans.errors import ComputationError
from marathon_trainer.plans.rounding import round_half_up

_DURATION_PATTERN = re.compile(r"^(\d+):(\d{1,2})(?::(\d{1,2}))?$")


def duration_to_seconds(text: str) -> int:
    """Parse a duration string into total seconds.

    Args:
        text: Duration as "H:MM:SS" or "H:MM"

    Returns:
        Total seconds

    Raises:
        ComputationError: If the text is malformed or a component is out of range
    """
    if not isinstance(text, str):
        raise ComputationError(f"Invalid duration: {text!r}. Expected H:MM:SS or H:MM")

    match = _DURATION_PATTERN.match(text.strip())
    if match is None:
        raise ComputationError(f"Invalid duration: {text!r}. Expected H:MM:SS or H:MM")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)

    if minutes >= 60 or seconds >= 60:
        raise ComputationError(f"Invalid duration: {text!r}. Minutes and seconds must be below 60")

    return hours * 3600 + minutes * 60 + seconds


def seconds_to_pace(seconds: float) -> str:
    """Render a per-kilometer second count as "M:SS".

    Args:
        seconds: Seconds per kilometer

    Returns:
        Pace text, seconds zero-padded

    Raises:
        ComputationError: If seconds is negative or not finite
    """
    if not math.isfinite(seconds) or seconds < 0:
        raise ComputationError(f"Invalid pace seconds: {seconds}")

    total = int(round_half_up(seconds))
    minutes, remainder = divmod(total, 60)
    return f"{minutes}:{remainder:02d}"


def seconds_to_clock(seconds: float) -> str:
    """Render seconds as "H:MM", dropping leftover seconds."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}:{minutes:02d}"
