# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from strikechart.configuration import WidgetFamily
from strikechart.model.timeline import TimelineEntry
from strikechart.service.timeline import (
    build_timeline,
    placeholder_entry,
    snapshot_entry,
)
from strikechart.service.widget_host import DEFAULT_POLL_SECONDS
from strikechart.terminal.boundary import get_services
from strikechart.terminal.custom_typer import AliasedTyperGroup
from strikechart.view.widget import timeline_view, widget_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

FamilyOption = Annotated[
    Optional[str],
    typer.Option("--family", "-f", help="small, medium"),
]


def resolve_family(family: Optional[str], default: WidgetFamily) -> WidgetFamily:
    if family is None:
        return default
    if family not in ("small", "medium"):
        typer.echo(f"Invalid widget family: {family}. Valid options: small, medium")
        raise typer.Exit(1)
    return family  # type: ignore[return-value]


@app.command("show, s")
def show(
    ctx: typer.Context,
    family: FamilyOption = None,
    placeholder: Annotated[
        bool, typer.Option("--placeholder", help="Render the sample series")
    ] = False,
) -> None:
    """Render the widget as it looks right now."""
    services = get_services(ctx)
    widget_family = resolve_family(family, services.config["widget_family"])

    if placeholder:
        entry = placeholder_entry()
    else:
        entry = snapshot_entry(services.habit_data_repo.get_habit_data())
    widget_view(entry, widget_family)


@app.command("timeline, t")
def timeline(ctx: typer.Context) -> None:
    """List the 24 hourly snapshots the widget host would schedule."""
    services = get_services(ctx)
    timeline_view(build_timeline(services.habit_data_repo.get_habit_data()))


@app.command("watch, wa")
def watch(
    ctx: typer.Context,
    family: FamilyOption = None,
    poll: Annotated[
        float, typer.Option("--poll", help="Seconds between checks")
    ] = DEFAULT_POLL_SECONDS,
    iterations: Annotated[
        Optional[int], typer.Option("--iterations", hidden=True)
    ] = None,
) -> None:
    """Keep the widget on screen, redrawing on reload or new timeline entries."""
    services = get_services(ctx)
    widget_family = resolve_family(family, services.config["widget_family"])
    host = services.widget_host()
    console = Console()

    def render(entry: TimelineEntry) -> None:
        console.clear()
        widget_view(entry, widget_family)

    try:
        host.run(render, poll_seconds=poll, iterations=iterations)
    except KeyboardInterrupt:
        raise typer.Exit(0)
