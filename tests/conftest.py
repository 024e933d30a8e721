"""Shared test fixtures for jj-prompt.

Provides a fake ``jj`` that replaces ``subprocess.run`` so no test needs
the real binary, plus a plain-text render config.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field

import pytest

from jj_prompt.models.config import RenderConfig


@dataclass
class FakeJJ:
    """Scripted stand-in for ``subprocess.run``.

    Responses are keyed by jj subcommand (``"log"``, ``"diff"``).  A
    response is either a CompletedProcess or an exception to raise.
    """

    responses: dict[str, object] = field(default_factory=dict)
    calls: list[tuple[list[str], dict]] = field(default_factory=list)

    def respond(
        self,
        subcommand: str,
        stdout: str | bytes = b"",
        *,
        returncode: int = 0,
        stderr: bytes = b"",
    ) -> None:
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        self.responses[subcommand] = subprocess.CompletedProcess(
            args=[], returncode=returncode, stdout=stdout, stderr=stderr
        )

    def fail(self, subcommand: str, exc: BaseException) -> None:
        self.responses[subcommand] = exc

    def subcommands(self) -> list[str]:
        return [_subcommand(command) for command, _ in self.calls]

    def __call__(self, command: list[str], **kwargs) -> subprocess.CompletedProcess:
        self.calls.append((list(command), kwargs))
        response = self.responses.get(_subcommand(command))
        if response is None:
            raise AssertionError(f"unexpected jj call: {command}")
        if isinstance(response, BaseException):
            raise response
        return response


def _subcommand(command: list[str]) -> str:
    return next(arg for arg in command[1:] if not arg.startswith("-"))


@pytest.fixture
def fake_jj(monkeypatch: pytest.MonkeyPatch) -> FakeJJ:
    """Replace subprocess.run for the duration of a test."""
    fake = FakeJJ()
    monkeypatch.setattr("jj_prompt.process.subprocess.run", fake)
    return fake


@pytest.fixture
def plain_config(tmp_path) -> RenderConfig:
    """Default render config with colors off, rooted in a temp directory."""
    return RenderConfig(cwd=tmp_path, color_enabled=False)
