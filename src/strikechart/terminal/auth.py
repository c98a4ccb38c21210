# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from strikechart.terminal.boundary import get_services, user_action
from strikechart.view.habit import status_view


def login(
    ctx: typer.Context,
    username: Annotated[
        Optional[str],
        typer.Option("--username", "-u", help="Habitica username or email"),
    ] = None,
    password: Annotated[
        Optional[str],
        typer.Option("--password", "-p", help="Prompted for when omitted"),
    ] = None,
    user_id: Annotated[
        Optional[str],
        typer.Option("--user-id", "-id", help="Settings > API > User ID"),
    ] = None,
    api_token: Annotated[
        Optional[str],
        typer.Option("--api-token", "-t", help="Settings > API > API Token"),
    ] = None,
) -> None:
    """Connect to Habitica with a username and password, or with API tokens."""
    services = get_services(ctx)
    console = Console()

    if user_id is not None or api_token is not None:
        if not user_id or not api_token:
            typer.echo("Both --user-id and --api-token are required.")
            raise typer.Exit(1)
        with user_action():
            services.sync.login_with_tokens(user_id, api_token)
    else:
        if not username:
            username = typer.prompt("Username or email")
        if not password:
            password = typer.prompt("Password", hide_input=True)
        if not username or not password:
            typer.echo("Username and password must not be empty.")
            raise typer.Exit(1)
        with user_action():
            services.sync.login_with_password(username, password)

    console.print("[green]Connected to Habitica.[/green]")


def logout(ctx: typer.Context) -> None:
    """Forget the saved Habitica credentials."""
    with user_action():
        get_services(ctx).sync.logout()
    typer.echo("Logged out.")


def status(ctx: typer.Context) -> None:
    """Show login state, the tracked habit and the cached series."""
    services = get_services(ctx)
    status_view(
        services.sync.is_authenticated(),
        services.selected_habit_repo.get_selected_habit(),
        services.habit_data_repo.get_habit_data(),
    )
