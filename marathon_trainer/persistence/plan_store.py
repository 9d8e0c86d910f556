"""Plan storage - where callers keep the last generated plan.

The plan core never touches storage. Callers that want the calendar view to
find a plan again save it here under a fixed key.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from marathon_trainer.plans.errors import PlanStoreError
from marathon_trainer.plans.types import TrainingPlan

PLAN_STORAGE_KEY = "trainingPlan"


class PlanStore(Protocol):
    """Storage for a single current plan."""

    def save(self, plan: TrainingPlan) -> None: ...

    def load(self) -> TrainingPlan | None: ...

    def clear(self) -> None: ...


def _decode_plan(raw: str) -> TrainingPlan:
    try:
        return TrainingPlan.model_validate_json(raw)
    except PydanticValidationError as e:
        raise PlanStoreError(f"Stored plan under '{PLAN_STORAGE_KEY}' is invalid: {e}") from e


def _encode_plan(plan: TrainingPlan) -> str:
    return plan.model_dump_json(by_alias=True, exclude_none=True)


class InMemoryPlanStore:
    """Keeps serialized plans in a dict, keyed like browser local storage."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def save(self, plan: TrainingPlan) -> None:
        self._items[PLAN_STORAGE_KEY] = _encode_plan(plan)

    def load(self) -> TrainingPlan | None:
        raw = self._items.get(PLAN_STORAGE_KEY)
        if raw is None:
            return None
        return _decode_plan(raw)

    def clear(self) -> None:
        self._items.pop(PLAN_STORAGE_KEY, None)


class JsonFilePlanStore:
    """Keeps serialized plans in a JSON object file on disk.

    The file maps storage keys to serialized plans. Writes go through a temp
    file in the same directory and an atomic replace.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_items(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            items = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise PlanStoreError(f"Plan store {self.path} is not valid JSON: {e}") from e
        if not isinstance(items, dict):
            raise PlanStoreError(f"Plan store {self.path} must contain a JSON object")
        return items

    def _write_items(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(temp_path, self.path)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def save(self, plan: TrainingPlan) -> None:
        items = self._read_items()
        items[PLAN_STORAGE_KEY] = _encode_plan(plan)
        self._write_items(items)
        logger.info(f"Saved plan ({len(plan.weeks)} weeks) to {self.path}")

    def load(self) -> TrainingPlan | None:
        raw = self._read_items().get(PLAN_STORAGE_KEY)
        if raw is None:
            logger.debug(f"No plan stored in {self.path}")
            return None
        return _decode_plan(raw)

    def clear(self) -> None:
        items = self._read_items()
        if items.pop(PLAN_STORAGE_KEY, None) is not None:
            self._write_items(items)
