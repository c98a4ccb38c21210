# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from strikechart.bootstrap import build_services
from strikechart.repository.configuration import CONFIGURATION_REPO
from strikechart.terminal import auth, configuration, habit, widget
from strikechart.terminal.custom_typer import OrderedAliasedTyperGroup
from strikechart.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Strike Chart - GitHub-style habit tracking for Habitica",
    no_args_is_help=True,
)
app.command(name="login, li")(auth.login)
app.command(name="logout, lo")(auth.logout)
app.command(name="status, st")(auth.status)
app.add_typer(habit.app, name="habit, h", help="Pick and refresh the tracked daily")
app.add_typer(widget.app, name="widget, w", help="Widget host")
app.add_typer(configuration.app, name="config, c", help="Settings")


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
) -> None:
    """
    Strike Chart - GitHub-style habit tracking for Habitica

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if ctx.obj is None:
        ctx.obj = build_services(CONFIGURATION_REPO.get_config())


def run() -> None:
    app()
