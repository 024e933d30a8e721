"""File-count probe: how many files the working-copy change touches.

This is the expensive part of a prompt render (roughly 3.5x the status
query alone), so callers can switch it off.  Failures never escape
:func:`probe_file_count`; the prompt simply renders without a count.
"""
from __future__ import annotations

import logging
from pathlib import Path

from jj_prompt.contract import DEFAULT_CONTRACT, JJContract
from jj_prompt.exceptions import JJPromptError, MalformedOutputError
from jj_prompt.process import run_command

logger = logging.getLogger(__name__)


def parse_file_count(output: str) -> int:
    """Read the file count from ``jj diff --stat`` output.

    The last line is a summary such as
    ``9 files changed, 449 insertions(+), 187 deletions(-)``; its first
    word is the count.  Output with no lines at all means no changes.

    Raises:
        MalformedOutputError: The summary line does not start with a
            non-negative integer.
    """
    lines = [line for line in output.splitlines() if line.strip()]
    if not lines:
        return 0

    summary = lines[-1]
    words = summary.split()
    if not words or not words[0].isdecimal():
        raise MalformedOutputError(summary, "no file count in diff summary")
    return int(words[0])


def probe_file_count(cwd: Path | None, contract: JJContract = DEFAULT_CONTRACT) -> int | None:
    """Count changed files in the working-copy change.

    Returns:
        The count, or None when the query or its parsing failed.
    """
    try:
        output = run_command(contract.program, contract.file_count_command(), cwd=cwd)
        return parse_file_count(output)
    except JJPromptError as e:
        logger.debug("file count unavailable: %s", e)
        return None
