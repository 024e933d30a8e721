"""jj-prompt prompt -- print the status line."""

from __future__ import annotations

import logging

import click

from jj_prompt.exceptions import JJPromptError
from jj_prompt.prompt import build_prompt

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def prompt(ctx: click.Context) -> None:
    """Print the prompt line for the working copy (default command).

    Exits 1 with nothing on stdout when the status cannot be read.
    """
    from jj_prompt.cli import _get_config

    config = _get_config(ctx)
    try:
        line = build_prompt(config)
    except JJPromptError as e:
        logger.debug("no prompt for %s: %s", config.cwd, e)
        raise SystemExit(1) from None

    # color=True keeps escapes when stdout is a pipe, as under starship.
    click.echo(line, nl=False, color=True)
