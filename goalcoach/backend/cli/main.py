#!/usr/bin/env python3
"""
GoalCoach command line.

Entry point for the backend. Commands:
1. serve       – run the REST API with uvicorn
2. suggest     – generate one kind of coaching suggestion in the terminal
3. check-deps  – verify every runtime package can be imported

API keys are read from the environment; a ``.env`` file in the working
directory is loaded first.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from goalcoach import __version__
from goalcoach.backend.core.llm import create_client
from goalcoach.backend.core.suggestions import SuggestionGenerator, quadrant_for
from goalcoach.backend.core.utils.config import resolve_config
from goalcoach.backend.core.utils.logging_setup import setup_logging

console = Console()

SUGGESTION_KINDS = ("journal", "core-values", "fitness", "wellness", "motivation", "goals", "tasks", "insight")


def _log_level(verbose: bool, debug: bool) -> int:
    return logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)


@click.group()
@click.version_option(__version__, prog_name="goalcoach")
def cli():
    """GoalCoach – AI coaching suggestions and goal analytics."""
    load_dotenv()


@cli.command()
@click.option("--config", "-c", type=click.Path(exists=True), default=None, help="Path to configuration file.")
@click.option("--host", default=None, help="Bind address (default from config).")
@click.option("--port", type=int, default=None, help="Port (default from config).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write the full log to this file.")
def serve(
    config: str | None,
    host: str | None,
    port: int | None,
    reload: bool,
    debug: bool,
    log_file: str | None,
):
    """Run the REST API."""
    import uvicorn

    setup_logging(logging.DEBUG if debug else logging.INFO, log_file)
    logger = logging.getLogger(__name__)

    try:
        cfg = resolve_config(config)
    except FileNotFoundError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(1) from e

    if config:
        # The app module resolves its own config on import
        os.environ["GOALCOACH_CONFIG"] = config

    host = host or cfg["server"]["host"]
    port = port or int(cfg["server"]["port"])
    logger.info("Starting GoalCoach API on %s:%d", host, port)
    uvicorn.run("goalcoach.backend.api.app:app", host=host, port=port, reload=reload, log_config=None)


@cli.command()
@click.argument("kind", type=click.Choice(SUGGESTION_KINDS))
@click.option("--config", "-c", type=click.Path(exists=True), default=None, help="Path to configuration file.")
@click.option("--goal-type", default=None, help="journal: goal type (personal_development, career, health).")
@click.option("--mood", default=None, help="journal: current mood.")
@click.option("--goal-title", default=None, help="motivation/tasks/insight: goal title.")
@click.option("--description", default="", help="tasks: goal description.")
@click.option("--idea", default=None, help="goals: free-form goal idea.")
@click.option("--progress", "progress_pct", type=click.FloatRange(0, 100), default=0.0, help="insight: percent complete.")
@click.option(
    "--fitness-level",
    type=click.Choice(["beginner", "intermediate", "advanced"]),
    default="beginner",
    help="fitness: current level.",
)
@click.option("--goal", "goals", multiple=True, help="fitness: fitness goal. Can be specified multiple times.")
@click.option("--time", "time_available", type=click.IntRange(min=1), default=30, help="fitness: minutes per workout.")
@click.option("--category", "categories", multiple=True, help="wellness: category. Can be specified multiple times.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print raw JSON.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write the full log to this file.")
def suggest(
    kind: str,
    config: str | None,
    goal_type: str | None,
    mood: str | None,
    goal_title: str | None,
    description: str,
    idea: str | None,
    progress_pct: float,
    fitness_level: str,
    goals: tuple,
    time_available: int,
    categories: tuple,
    as_json: bool,
    verbose: bool,
    debug: bool,
    log_file: str | None,
):
    """
    Generate one KIND of coaching suggestion.

    Falls back to the built-in suggestions when the LLM is unreachable,
    so this always prints something.
    """
    setup_logging(_log_level(verbose, debug), log_file)

    if kind in ("tasks", "insight") and not goal_title:
        raise click.UsageError(f"'{kind}' requires --goal-title")
    if kind == "goals" and not (idea and idea.strip()):
        raise click.UsageError("'goals' requires --idea")

    try:
        cfg = resolve_config(config)
        generator = SuggestionGenerator(create_client(cfg["llm"]))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(1) from e

    calls = {
        "journal": lambda: {"prompts": generator.journal_prompts(goal_type, mood)},
        "core-values": generator.core_values_exercise,
        "fitness": lambda: generator.fitness_recommendations(fitness_level, list(goals), time_available),
        "wellness": lambda: generator.wellness_suggestions(list(categories) or None),
        "motivation": lambda: {"quote": generator.motivational_quote(goal_title)},
        "goals": lambda: {"suggestions": generator.goal_suggestions(idea.strip())},
        "tasks": lambda: generator.task_suggestions(goal_title, description),
        "insight": lambda: {"insight": generator.progress_insight(goal_title, progress_pct)},
    }

    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task(f"[cyan]Generating {kind} suggestions...", total=None)
        result = calls[kind]()
        progress.update(task, completed=True)

    if kind == "tasks":
        result = [{**t, "quadrant": quadrant_for(t["urgency"], t["importance"])} for t in result]

    if as_json:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        _render(kind, result)


def _render(kind: str, result: Any) -> None:
    """Pretty-print a suggestion result with rich."""
    if kind == "tasks":
        table = Table(title="Suggested Tasks")
        for column in ("Task", "Quadrant", "Priority", "Hours"):
            table.add_column(column)
        for t in result:
            table.add_row(t["title"], t["quadrant"], t["priority"], f"{t['estimatedHours']:g}")
        console.print(table)
    elif kind == "fitness":
        for day in result["workoutPlan"]:
            lines = [
                f"• {ex.get('name', '?')}  " + " ".join(str(ex[k]) for k in ("sets", "reps", "duration") if k in ex)
                for ex in day.get("exercises", [])
            ]
            console.print(Panel("\n".join(lines), title=f"{day.get('day')} – {day.get('focus', '')}"))
        console.print(Panel("\n".join(f"• {tip}" for tip in result["nutritionTips"]), title="Nutrition"))
    elif kind == "wellness":
        for s in result["suggestions"]:
            steps = "\n".join(f"  - {step}" for step in s.get("actionSteps", []))
            console.print(Panel(f"{s['description']}\n{steps}", title=f"[{s.get('category', '')}] {s['title']}"))
        console.print(f"\n[bold]{result['focusArea']}[/bold]: {result['personalizedMessage']}")
    elif kind == "core-values":
        console.print(Panel(result["exercise"], title="Core Values Exercise"))
        for q in result["questions"]:
            console.print(f"• {q}")
        console.print("\n" + ", ".join(result["values"]))
    else:
        (items,) = result.values()
        text = "\n".join(f"{i}. {item}" for i, item in enumerate(items, 1)) if isinstance(items, list) else items
        console.print(Panel(text or "(nothing suggested)", title=kind.replace("-", " ").title()))


@cli.command("check-deps")
def check_deps():
    """Verify every runtime package can be imported."""
    from goalcoach.backend.cli.check_deps import main as run_check

    raise SystemExit(run_check())


if __name__ == "__main__":
    cli()
