"""jj-prompt detect -- exit 0 inside a jj workspace, 1 otherwise."""

from __future__ import annotations

import click

from jj_prompt.operations.detection import detect as is_workspace


@click.command()
@click.pass_context
def detect(ctx: click.Context) -> None:
    """Exit 0 if the directory is inside a jj workspace, 1 otherwise."""
    from jj_prompt.cli import _get_config

    config = _get_config(ctx)
    raise SystemExit(0 if is_workspace(config.cwd) else 1)
