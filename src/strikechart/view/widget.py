# SPDX-License-Identifier: MIT

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from strikechart.color import STREAK_COLOR
from strikechart.configuration import WidgetFamily
from strikechart.model.habit_data import HabitWidgetData
from strikechart.model.timeline import Timeline, TimelineEntry
from strikechart.service.habit_data import current_streak
from strikechart.service.timeline import resolve_habit_data
from strikechart.time import datetime_to_display_local_datetime_str
from strikechart.view.contribution import COMPACT_GRAPH_COLUMNS, build_contribution_grid
from strikechart.view.header import header


def build_small_widget(habit_data: HabitWidgetData) -> Group:
    return Group(build_contribution_grid(habit_data, COMPACT_GRAPH_COLUMNS))


def build_medium_widget(habit_data: HabitWidgetData) -> Group:
    top = Table.grid(expand=True)
    top.add_column()
    top.add_column(justify="right")
    top.add_row(Text("Strike Chart", style="dim"), Text("Streak", style="dim"))
    top.add_row(
        Text(habit_data["habit_name"], style="bold"),
        Text(
            str(current_streak(habit_data["completion_data"])),
            style=f"bold {STREAK_COLOR}",
        ),
    )
    return Group(top, build_contribution_grid(habit_data, COMPACT_GRAPH_COLUMNS))


def build_widget_panel(entry: TimelineEntry, family: WidgetFamily) -> Panel:
    habit_data = resolve_habit_data(entry)
    if family == "medium":
        body = build_medium_widget(habit_data)
    else:
        body = build_small_widget(habit_data)

    subtitle = datetime_to_display_local_datetime_str(entry["date"])
    if entry["habit_data"] is None:
        subtitle = f"sample - {subtitle}"
    return Panel(body, expand=False, subtitle=subtitle, padding=(0, 1))


def widget_view(entry: TimelineEntry, family: WidgetFamily) -> None:
    console = Console()
    console.print(build_widget_panel(entry, family))


def timeline_view(timeline: Timeline) -> None:
    """List every snapshot of a widget timeline."""
    header("widget-timeline")

    timeline_table = Table()
    timeline_table.add_column("#")
    timeline_table.add_column("as of")
    timeline_table.add_column("habit")
    timeline_table.add_column("days")
    timeline_table.add_column("streak")

    for index, entry in enumerate(timeline["entries"]):
        habit_data = resolve_habit_data(entry)
        completed_days = sum(1 for d in habit_data["completion_data"] if d["completed"])
        timeline_table.add_row(
            str(index + 1),
            datetime_to_display_local_datetime_str(entry["date"]),
            habit_data["habit_id"],
            f"{completed_days}/{len(habit_data['completion_data'])}",
            str(current_streak(habit_data["completion_data"])),
        )

    console = Console()
    console.print(timeline_table)
    console.print(f"reload policy: {timeline['policy']}")
