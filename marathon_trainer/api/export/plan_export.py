"""CSV export endpoint for training plans.

Read-only endpoint that renders a generated plan to CSV.
No recomputation, no mutations - plan JSON → CSV.
"""

import csv
import io
from datetime import date
from datetime import date as date_type

from fastapi import APIRouter
from fastapi.responses import Response
from loguru import logger
from pydantic import BaseModel

from marathon_trainer.plans.errors import PlanExportError
from marathon_trainer.plans.labels import get_session_type_from_name, get_training_type_name
from marathon_trainer.plans.types import SessionType, TrainingPlan

router = APIRouter(prefix="/api/export", tags=["export"])

CSV_FIELDNAMES: list[str] = [
    "date",
    "training_type",
    "distance_km",
    "pace",
    "week_number",
]


class ExportedSession(BaseModel):
    """One session row read back from an exported CSV."""

    date: date_type
    type: SessionType
    distance: float
    pace: str
    week_number: int


def render_plan_csv(plan: TrainingPlan) -> str:
    """Render every session of a plan as one CSV row.

    Args:
        plan: Generated training plan

    Returns:
        CSV text with a header row
    """
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDNAMES, lineterminator="\n")
    writer.writeheader()

    for week in plan.weeks:
        for session in week.sessions:
            writer.writerow({
                "date": session.date.isoformat(),
                "training_type": get_training_type_name(session.type),
                "distance_km": f"{session.distance:.1f}",
                "pace": session.pace,
                "week_number": week.number,
            })

    csv_content = output.getvalue()
    output.close()
    return csv_content


def parse_plan_csv(csv_content: str) -> list[ExportedSession]:
    """Read rows back from CSV produced by render_plan_csv.

    Args:
        csv_content: CSV text with header

    Returns:
        Rows in file order

    Raises:
        PlanExportError: If the header or a row is malformed
    """
    reader = csv.DictReader(io.StringIO(csv_content))
    if reader.fieldnames != CSV_FIELDNAMES:
        raise PlanExportError(f"Unexpected CSV header: {reader.fieldnames}. Expected {CSV_FIELDNAMES}")

    rows: list[ExportedSession] = []
    for line_number, row in enumerate(reader, start=2):
        try:
            rows.append(
                ExportedSession(
                    date=date.fromisoformat(row["date"]),
                    type=get_session_type_from_name(row["training_type"]),
                    distance=float(row["distance_km"]),
                    pace=row["pace"],
                    week_number=int(row["week_number"]),
                )
            )
        except (TypeError, ValueError) as e:
            raise PlanExportError(f"Malformed CSV row at line {line_number}: {e}") from e

    return rows


@router.post("/csv")
def export_plan_csv(plan: TrainingPlan) -> Response:
    """Export training plan sessions to CSV.

    Args:
        plan: Plan JSON as returned by the training endpoint

    Returns:
        CSV file download response
    """
    logger.info(f"Exporting plan CSV: race_type={plan.race_type}, weeks={len(plan.weeks)}")

    csv_content = render_plan_csv(plan)

    return Response(
        csv_content,
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename=training_plan_{date.today().isoformat()}.csv",
        },
    )
