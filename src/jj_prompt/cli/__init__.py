"""jj-prompt CLI -- prompt segment for jj working copies.

Loaded via the ``jj-prompt`` entry point defined in pyproject.toml.
Global options build one RenderConfig, stored on the Click context for
the subcommands.  With no subcommand the prompt line is printed.

Typical starship configuration::

    [custom.jj]
    when = "jj-prompt detect"
    command = "jj-prompt --no-file-count"
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from jj_prompt._version import __version__
from jj_prompt.models.config import RenderConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging() -> None:
    """Send debug logs to stderr; stdout carries only the prompt line."""
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=LOG_FORMAT)


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="jj-prompt")
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory to inspect (default: current directory).",
)
@click.option(
    "--id-length",
    type=click.IntRange(min=1),
    default=4,
    show_default=True,
    help="Number of change id characters to display.",
)
@click.option("--symbol", default=" ", show_default=True, help="Prefix printed before the change id.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors.")
@click.option("--no-file-count", is_flag=True, help="Skip the changed-file count (faster).")
@click.option("--debug", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    cwd: Path | None,
    id_length: int,
    symbol: str,
    no_color: bool,
    no_file_count: bool,
    debug: bool,
) -> None:
    """Fast jj status segment for shell prompts."""
    if debug:
        _configure_logging()

    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as e:
            # The shell can sit in a directory that was removed after cd.
            logger.debug("current directory unavailable: %s", e)
            raise SystemExit(1) from None

    ctx.ensure_object(dict)
    ctx.obj["config"] = RenderConfig(
        cwd=cwd,
        id_length=id_length,
        symbol=symbol,
        color_enabled=not no_color,
        include_file_count=not no_file_count,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(prompt)


def _get_config(ctx: click.Context) -> RenderConfig:
    """Return the RenderConfig built by the ``cli`` group."""
    return ctx.obj["config"]


# Register subcommands after cli group is defined
from jj_prompt.cli.commands.prompt import prompt  # noqa: E402
from jj_prompt.cli.commands.detect import detect  # noqa: E402

cli.add_command(prompt)
cli.add_command(detect)
