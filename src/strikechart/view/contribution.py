# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from strikechart.color import color_for_level
from strikechart.model.habit_data import HabitWidgetData
from strikechart.service.habit_data import completion_level

CELL_SYMBOL = "■"
MAIN_GRAPH_COLUMNS = 7  # Days of the week
COMPACT_GRAPH_COLUMNS = 9


def build_contribution_grid(
    habit_data: HabitWidgetData,
    columns: int = MAIN_GRAPH_COLUMNS,
) -> Text:
    """
    Build the cell grid for a completion series.

    Days fill rows left to right, oldest first, `columns` cells per row.
    Each cell is colored by its completion level.
    """
    grid = Text()
    days = habit_data["completion_data"]
    for index, day in enumerate(days):
        if index > 0 and index % columns == 0:
            grid.append("\n")
        elif index > 0:
            grid.append(" ")
        grid.append(CELL_SYMBOL, style=color_for_level(completion_level(day)))
    return grid


def build_legend() -> Text:
    legend = Text()
    legend.append("Less ", style="dim")
    for level in range(5):
        legend.append(CELL_SYMBOL, style=color_for_level(level))
    legend.append(" More", style="dim")
    return legend


def build_contribution_graph(
    habit_data: HabitWidgetData,
    title: Optional[str] = None,
    columns: int = MAIN_GRAPH_COLUMNS,
    show_labels: bool = True,
) -> Group:
    grid = build_contribution_grid(habit_data, columns)
    if not show_labels:
        return Group(grid)

    heading = Table.grid(expand=False, padding=(0, 2))
    heading.add_column()
    heading.add_column(justify="right")
    heading.add_row(
        Text(title if title is not None else habit_data["habit_name"], style="bold"),
        Text(f"Last {len(habit_data['completion_data'])} days", style="dim"),
    )
    return Group(heading, grid, build_legend())


def contribution_graph_view(
    habit_data: HabitWidgetData,
    title: Optional[str] = None,
    columns: int = MAIN_GRAPH_COLUMNS,
) -> None:
    console = Console()
    console.print(
        Padding(build_contribution_graph(habit_data, title, columns), (1, 1))
    )
