# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console

from strikechart.color import CONTRIBUTION_LEVEL_COLORS
from strikechart.service.habit_data import create_sample_habit_data
from strikechart.service.timeline import snapshot_entry
from strikechart.view.contribution import (
    CELL_SYMBOL,
    build_contribution_graph,
    build_contribution_grid,
    build_legend,
)
from strikechart.view.widget import build_widget_panel

NOW = pendulum.datetime(2024, 3, 15, 9, 30, tz="UTC")


def render(renderable) -> str:
    console = Console(width=60, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_grid_rows_follow_column_count() -> None:
    grid = build_contribution_grid(create_sample_habit_data(NOW), columns=7)
    rows = grid.plain.split("\n")

    assert len(rows) == 7
    assert [row.count(CELL_SYMBOL) for row in rows] == [7, 7, 7, 7, 7, 7, 3]


def test_compact_grid() -> None:
    grid = build_contribution_grid(create_sample_habit_data(NOW), columns=9)
    assert [row.count(CELL_SYMBOL) for row in grid.plain.split("\n")] == [9] * 5


def test_cells_are_colored_by_level() -> None:
    grid = build_contribution_grid(create_sample_habit_data(NOW), columns=45)
    styles = [str(span.style) for span in grid.spans]

    # sample pattern starts: count 2, count 1, not completed, count 3
    assert styles[:4] == [
        CONTRIBUTION_LEVEL_COLORS[2],
        CONTRIBUTION_LEVEL_COLORS[1],
        CONTRIBUTION_LEVEL_COLORS[0],
        CONTRIBUTION_LEVEL_COLORS[3],
    ]


def test_legend_has_five_levels() -> None:
    legend = build_legend()
    assert legend.plain == f"Less {CELL_SYMBOL * 5} More"


def test_graph_labels() -> None:
    text = render(build_contribution_graph(create_sample_habit_data(NOW), title="Stretch"))
    assert "Stretch" in text
    assert "Last 45 days" in text
    assert "Less" in text

    text = render(build_contribution_graph(create_sample_habit_data(NOW), show_labels=False))
    assert "Last 45 days" not in text


def test_medium_widget_shows_streak() -> None:
    text = render(build_widget_panel(snapshot_entry(None, NOW), "medium"))
    assert "Strike Chart" in text
    assert "Streak" in text
