# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from strikechart.color import COMPLETED_COLOR, PENDING_COLOR, STREAK_COLOR
from strikechart.model.habit_data import HabitWidgetData
from strikechart.model.habitica import HabiticaTask, display_name
from strikechart.model.selected_habit import SelectedHabit
from strikechart.service.habit_data import current_streak
from strikechart.time import datetime_to_display_local_datetime_str
from strikechart.view.header import header


def habits_view(
    tasks: list[HabiticaTask],
    selected_id: Optional[str] = None,
) -> None:
    """Display daily tasks available for tracking."""
    header("select daily task")

    console = Console()
    if not tasks:
        console.print("\n[bold]No Daily Tasks Found[/bold]")
        console.print(
            "Create some daily recurring tasks in Habitica first, "
            "then come back here to select one to track."
        )
        return

    habits_table = Table(box=box.SIMPLE)
    habits_table.add_column("#")
    habits_table.add_column("name")
    habits_table.add_column("status")
    habits_table.add_column("streak")
    habits_table.add_column("id", style="dim")

    for index, task in enumerate(tasks):
        if task["completed"]:
            status = f"[{COMPLETED_COLOR}]Completed[/{COMPLETED_COLOR}]"
        else:
            status = f"[{PENDING_COLOR}]Pending[/{PENDING_COLOR}]"

        streak = ""
        if task["streak"] is not None and task["streak"] > 0:
            streak = f"[{STREAK_COLOR}]{task['streak']} day streak[/{STREAK_COLOR}]"

        name = display_name(task)
        if task["id"] == selected_id:
            name = f"[bold]{name}[/bold] *"

        habits_table.add_row(str(index + 1), name, status, streak, task["id"])

    console.print(habits_table)


def status_view(
    authenticated: bool,
    selected_habit: Optional[SelectedHabit],
    habit_data: Optional[HabitWidgetData],
) -> None:
    header("status")

    status_table = Table(box=box.SIMPLE)
    status_table.add_column("property")
    status_table.add_column("value")

    status_table.add_row("authenticated", "yes" if authenticated else "no")
    status_table.add_row(
        "habit", selected_habit["name"] if selected_habit is not None else ""
    )
    status_table.add_row(
        "habit id", selected_habit["id"] if selected_habit is not None else ""
    )
    if habit_data is not None:
        status_table.add_row("days cached", str(len(habit_data["completion_data"])))
        status_table.add_row(
            "streak", str(current_streak(habit_data["completion_data"]))
        )
        status_table.add_row(
            "last updated",
            datetime_to_display_local_datetime_str(habit_data["last_updated"]),
        )
    else:
        status_table.add_row("days cached", "")
        status_table.add_row("streak", "")
        status_table.add_row("last updated", "")

    console = Console()
    console.print(status_table)
