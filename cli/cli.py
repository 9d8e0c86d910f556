"""CLI for Marathon Trainer.

Developer CLI to generate plans locally through the same validation and
generator code path the HTTP endpoint uses.
"""

from datetime import date
from pathlib import Path

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from marathon_trainer.api.export.plan_export import render_plan_csv
from marathon_trainer.config.settings import settings
from marathon_trainer.core.logger import setup_logger
from marathon_trainer.persistence.plan_store import JsonFilePlanStore
from marathon_trainer.plans.duration import duration_to_seconds
from marathon_trainer.plans.errors import PlanError
from marathon_trainer.plans.generator import generate_training_plan_from_payload
from marathon_trainer.plans.labels import get_race_type_name, get_runner_level_name, get_training_type_name
from marathon_trainer.plans.types import TrainingPlan

console = Console()

app = typer.Typer(
    name="marathon-trainer",
    help="Marathon Trainer CLI - generate and inspect training plans",
    add_completion=False,
)


def _setup_logging(debug: bool = False) -> None:
    """Configure logging from settings.

    Args:
        debug: Enable debug logging level
    """
    setup_logger(settings, level="DEBUG" if debug else None)


def _render_plan(plan: TrainingPlan) -> None:
    """Print a plan summary panel and one table row per session."""
    level = get_runner_level_name(plan.race_type, duration_to_seconds(plan.current_pb))
    summary = Text()
    summary.append(f"{get_race_type_name(plan.race_type)}  ", style="bold")
    summary.append(f"{plan.current_pb} → {plan.target_pb}  ")
    summary.append(f"race {plan.race_date.isoformat()}  ")
    summary.append(f"{len(plan.weeks)} weeks  {level}", style="cyan")
    console.print(Panel(summary, title="Training plan", border_style="green"))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Week", justify="right")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Distance (km)", justify="right")
    table.add_column("Pace (/km)", justify="right")
    table.add_column("Notes")

    for week in plan.weeks:
        for index, session in enumerate(week.sessions):
            table.add_row(
                str(week.number) if index == 0 else "",
                session.date.isoformat(),
                get_training_type_name(session.type),
                f"{session.distance:.1f}",
                session.pace,
                session.notes or "",
            )
        table.add_row("", "", "[dim]total[/dim]", f"[bold]{week.total_distance}[/bold]", "", "", end_section=True)

    console.print(table)


@app.command()
def generate(
    race_type: str = typer.Option("full", "--race-type", "-r", help="Race type: full, half or 10k"),
    current_pb: str = typer.Option(..., "--current-pb", help="Current PB (H:MM:SS)"),
    target_pb: str = typer.Option(..., "--target-pb", help="Target PB (H:MM:SS)"),
    race_date: str = typer.Option(..., "--race-date", help="Race date (YYYY-MM-DD)"),
    frequency: int = typer.Option(5, "--frequency", "-f", help="Sessions per week (3-7)"),
    mileage: float = typer.Option(40.0, "--mileage", "-m", help="Target weekly distance in km"),
    current_mileage: float | None = typer.Option(None, "--current-mileage", help="Current weekly distance in km"),
    growth_mode: str = typer.Option("fixed", "--growth-mode", help="Weekly distance growth: fixed or progressive"),
    today: str | None = typer.Option(None, "--today", help="Generate as if today were this date (YYYY-MM-DD)"),
    as_json: bool = typer.Option(False, "--json", help="Print the plan as JSON"),
    csv_path: Path | None = typer.Option(None, "--csv", help="Write the plan as CSV to this path"),
    save: bool = typer.Option(False, "--save", help="Save the plan to the local plan store"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Generate a training plan and print it."""
    _setup_logging(debug)

    payload = {
        "raceType": race_type,
        "currentPB": current_pb,
        "targetPB": target_pb,
        "raceDate": race_date,
        "weeklyFrequency": frequency,
        "weeklyMileage": mileage,
        "currentWeeklyMileage": current_mileage,
        "distanceGrowthMode": growth_mode,
    }

    try:
        generation_date = date.fromisoformat(today) if today else None
    except ValueError as e:
        console.print(f"[red]Error:[/red] invalid --today: {e}", style="bold red")
        raise typer.Exit(1) from e

    try:
        plan = generate_training_plan_from_payload(payload, today=generation_date)
    except PlanError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold red")
        raise typer.Exit(1) from e

    if as_json:
        console.print(JSON(plan.model_dump_json(by_alias=True, exclude_none=True)))
    else:
        _render_plan(plan)

    if csv_path is not None:
        csv_path.write_text(render_plan_csv(plan), encoding="utf-8")
        console.print(f"[green]CSV written to {csv_path}[/green]")

    if save:
        JsonFilePlanStore(settings.plan_store_path).save(plan)
        console.print(f"[green]Plan saved to {settings.plan_store_path}[/green]")


@app.command()
def show(
    as_json: bool = typer.Option(False, "--json", help="Print the plan as JSON"),
) -> None:
    """Show the plan saved in the local plan store."""
    _setup_logging()

    try:
        plan = JsonFilePlanStore(settings.plan_store_path).load()
        if plan is None:
            console.print("[yellow]No saved plan. Run 'generate --save' first.[/yellow]")
            raise typer.Exit(1)

        if as_json:
            console.print(JSON(plan.model_dump_json(by_alias=True, exclude_none=True)))
        else:
            _render_plan(plan)
    except PlanError as e:
        console.print(f"[red]Error:[/red] {e}", style="bold red")
        raise typer.Exit(1) from e


@app.command()
def server(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server.

    This command starts the FastAPI application using uvicorn.
    """
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("marathon_trainer.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
