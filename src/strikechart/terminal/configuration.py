# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from strikechart import configuration
from strikechart.repository.configuration import CONFIGURATION_REPO
from strikechart.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def __config_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("base_url", config["base_url"])
    table.add_row("client_name", config["client_name"])
    table.add_row(
        "request_timeout",
        str(config["request_timeout"])
        if config["request_timeout"] is not None
        else "None (library default)",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("widget_family", config["widget_family"])
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "log_to_file",
        "✓ Enabled" if config["log_to_file"] else "✗ Disabled",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(__config_table(config))
    console.print(f"config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    base_url: Annotated[
        Optional[str],
        typer.Option("--base-url", help="Habitica API root"),
    ] = None,
    client_name: Annotated[
        Optional[str],
        typer.Option("--client-name", help="Suffix for the x-client header"),
    ] = None,
    request_timeout: Annotated[
        Optional[float],
        typer.Option("--request-timeout", help="Seconds before a request gives up"),
    ] = None,
    remove_request_timeout: Annotated[
        bool,
        typer.Option("--remove-request-timeout", help="Use the library default"),
    ] = False,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory shared by the app and the widget host",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the platform data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header"),
    ] = None,
    widget_family: Annotated[
        Optional[str],
        typer.Option("--widget-family", help="small, medium"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(VALID_LOG_LEVELS)),
    ] = None,
    log_to_file: Annotated[
        Optional[bool],
        typer.Option("--log-to-file/--no-log-to-file"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if widget_family is not None and widget_family not in ("small", "medium"):
        typer.echo(f"Invalid widget family: {widget_family}. Valid options: small, medium")
        raise typer.Exit(1)
    if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
        typer.echo(
            f"Invalid log level: {log_level}. Valid options: {', '.join(VALID_LOG_LEVELS)}"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        base_url=base_url,
        client_name=client_name,
        request_timeout=request_timeout,
        remove_request_timeout=remove_request_timeout,
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        widget_family=widget_family,  # type: ignore[arg-type]
        log_level=log_level,
        log_to_file=log_to_file,
    )
    CONFIGURATION_REPO.flush()
    logging.getLogger(__name__).info("configuration updated")

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__config_table(config, title="Updated Configuration"))
