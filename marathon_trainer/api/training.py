"""Training plan generation endpoint.

Validates the runner input and hands it to the plan generator. The handler
holds no state; every request produces a fresh plan.
"""

from typing import Any

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse
from loguru import logger

from marathon_trainer.plans.errors import PlanError
from marathon_trainer.plans.generator import generate_training_plan_from_payload

router = APIRouter(prefix="/api/training", tags=["training"])

GENERATION_FAILED_MESSAGE = "Failed to generate training plan"


@router.post("")
def create_training_plan(payload: dict[str, Any] = Body(...)) -> JSONResponse:
    """Generate a training plan from runner input.

    Args:
        payload: RunnerInput JSON (camelCase fields)

    Returns:
        {"success": true, "data": TrainingPlan} on success,
        {"error": message} with 400 for rejected input or 500 otherwise
    """
    logger.info(f"Training plan requested: race_type={payload.get('raceType')}, race_date={payload.get('raceDate')}")

    try:
        plan = generate_training_plan_from_payload(payload)
    except PlanError as e:
        logger.warning(f"Training plan request rejected: {e}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(e)})
    except Exception:
        logger.exception("Failed to generate training plan")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERATION_FAILED_MESSAGE},
        )

    return JSONResponse(
        content={
            "success": True,
            "data": plan.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
    )
