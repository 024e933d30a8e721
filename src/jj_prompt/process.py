"""Process invoker: run the jj binary once and capture its output."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from jj_prompt.exceptions import NonZeroExitError, OutputNotUtf8Error, SpawnFailedError

logger = logging.getLogger(__name__)


def run_command(program: str, args: Sequence[str], cwd: Path | None = None) -> str:
    """Run ``program args...`` in ``cwd`` and return its decoded stdout.

    The call blocks until the child exits.  There is no timeout and no
    retry: the first failure is reported as-is.

    Args:
        program: Executable name or path.
        args: Arguments after the program name.
        cwd: Working directory for the child.  ``None`` means the current
            process directory.

    Returns:
        Standard output decoded as UTF-8 with trailing newlines removed.

    Raises:
        SpawnFailedError: The executable could not be started.
        NonZeroExitError: The child exited with a non-zero status.
        OutputNotUtf8Error: Standard output is not valid UTF-8.
    """
    command = [program, *args]
    logger.debug("running %s in %s", command[:3], cwd or Path.cwd())
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        # FileNotFoundError covers a missing binary and a missing cwd alike.
        raise SpawnFailedError(program, str(e)) from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        logger.debug("%s exited with %d", program, result.returncode)
        raise NonZeroExitError(command, result.returncode, stderr)

    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputNotUtf8Error(f"{program} produced non UTF-8 output: {e}") from e

    return stdout.rstrip("\r\n")
