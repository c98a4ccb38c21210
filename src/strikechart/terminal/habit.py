# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from strikechart.model.habitica import HabiticaTask
from strikechart.terminal.boundary import get_services, user_action
from strikechart.terminal.custom_typer import AliasedTyperGroup
from strikechart.view.contribution import contribution_graph_view
from strikechart.view.habit import habits_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def find_habit(tasks: list[HabiticaTask], reference: str) -> Optional[HabiticaTask]:
    """Resolve a 1-based list position or a task id."""
    if reference.isdigit():
        position = int(reference)
        if 1 <= position <= len(tasks):
            return tasks[position - 1]
    for task in tasks:
        if task["id"] == reference:
            return task
    return None


@app.command("list, ls")
def list_habits(ctx: typer.Context) -> None:
    """List daily tasks that can be tracked."""
    services = get_services(ctx)
    with user_action("Failed to fetch data from Habitica: "):
        tasks = services.sync.fetch_available_habits()

    selected_habit = services.selected_habit_repo.get_selected_habit()
    habits_view(tasks, selected_habit["id"] if selected_habit is not None else None)


@app.command("select, s", no_args_is_help=True)
def select(
    ctx: typer.Context,
    habit: Annotated[str, typer.Argument(help="List position or task id")],
) -> None:
    """Track a daily task and refresh its graph."""
    services = get_services(ctx)
    with user_action("Failed to fetch data from Habitica: "):
        tasks = services.sync.fetch_available_habits()

    task = find_habit(tasks, habit)
    if task is None:
        typer.echo(f"No daily task matches: {habit}")
        raise typer.Exit(1)

    with user_action():
        selected_habit = services.sync.select_habit(task)
    typer.echo(f"Tracking: {selected_habit['name']}")

    with user_action():
        habit_data = services.sync.refresh_habit_data()
    contribution_graph_view(habit_data, selected_habit["name"])


@app.command("refresh, r")
def refresh(ctx: typer.Context) -> None:
    """Re-fetch the tracked habit and rebuild its graph."""
    services = get_services(ctx)
    with user_action():
        habit_data = services.sync.refresh_habit_data()

    selected_habit = services.selected_habit_repo.get_selected_habit()
    contribution_graph_view(
        habit_data, selected_habit["name"] if selected_habit is not None else None
    )


@app.command("show, sh")
def show(ctx: typer.Context) -> None:
    """Show the cached contribution graph without touching the network."""
    services = get_services(ctx)
    selected_habit = services.selected_habit_repo.get_selected_habit()
    habit_data = services.habit_data_repo.get_habit_data()

    if selected_habit is None or habit_data is None:
        Console().print(
            "No habit data yet. Run [bold]strikechart habit select[/bold] first."
        )
        raise typer.Exit(1)

    contribution_graph_view(habit_data, selected_habit["name"])
