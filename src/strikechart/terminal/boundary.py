# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator, cast

import typer
from rich.console import Console

from strikechart.bootstrap import Services
from strikechart.color import ERROR_COLOR
from strikechart.model.error import StrikeChartError

logger = logging.getLogger(__name__)


def get_services(ctx: typer.Context) -> Services:
    return cast(Services, ctx.obj)


@contextmanager
def user_action(prefix: str = "") -> Iterator[None]:
    """
    Run one user action; failures end it with a message and exit code 1.

    Nothing is retried. The user runs the command again.
    """
    try:
        yield
    except StrikeChartError as e:
        logger.debug("user action failed", exc_info=True)
        console = Console(stderr=True)
        console.print(
            f"[{ERROR_COLOR}]{prefix}{e.message}[/{ERROR_COLOR}]", soft_wrap=True
        )
        raise typer.Exit(1) from e
