"""jj-prompt: fast Jujutsu status segment for shell prompts.

Reads the working-copy change from ``jj`` and renders it as one colored
line: change id, bookmarks, conflict or divergence marker, changed-file
count and description head.
"""

from jj_prompt._version import __version__

# Configuration and records
from jj_prompt.models.config import RenderConfig
from jj_prompt.models.status import StatusRecord
from jj_prompt.contract import DEFAULT_CONTRACT, JJContract

# Pipeline
from jj_prompt.operations import (
    detect,
    find_workspace_root,
    parse_file_count,
    parse_status,
    probe_file_count,
    query_status,
)
from jj_prompt.formatting import format_prompt, render_status, to_ansi
from jj_prompt.prompt import build_prompt

# Exceptions
from jj_prompt.exceptions import (
    JJPromptError,
    MalformedOutputError,
    NonZeroExitError,
    OutputNotUtf8Error,
    SpawnFailedError,
)

__all__ = [
    "__version__",
    "RenderConfig",
    "StatusRecord",
    "DEFAULT_CONTRACT",
    "JJContract",
    "detect",
    "find_workspace_root",
    "parse_file_count",
    "parse_status",
    "probe_file_count",
    "query_status",
    "format_prompt",
    "render_status",
    "to_ansi",
    "build_prompt",
    "JJPromptError",
    "MalformedOutputError",
    "NonZeroExitError",
    "OutputNotUtf8Error",
    "SpawnFailedError",
]
