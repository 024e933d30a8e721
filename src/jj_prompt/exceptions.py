"""jj-prompt exception hierarchy.

All jj-prompt exceptions inherit from JJPromptError.
"""

from __future__ import annotations


class JJPromptError(Exception):
    """Base exception for all jj-prompt errors."""


class SpawnFailedError(JJPromptError):
    """Raised when the VCS binary cannot be started at all.

    Covers a missing executable, permission problems and an unusable
    working directory.
    """

    def __init__(self, program: str, reason: str) -> None:
        self.program = program
        self.reason = reason
        super().__init__(f"Failed to run {program}: {reason}")


class NonZeroExitError(JJPromptError):
    """Raised when the VCS tool ran but reported failure.

    "Not inside a repository" lands here as well.
    """

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip().splitlines()[0] if stderr.strip() else "no output"
        super().__init__(
            f"{' '.join(command[:2])} exited with status {returncode}: {detail}"
        )


class OutputNotUtf8Error(JJPromptError):
    """Raised when the VCS tool writes bytes that are not valid UTF-8."""


class MalformedOutputError(JJPromptError):
    """Raised when the status line does not match the template contract."""

    def __init__(self, output: str, reason: str) -> None:
        self.output = output
        self.reason = reason
        super().__init__(f"Malformed status output ({reason}): {output!r}")
