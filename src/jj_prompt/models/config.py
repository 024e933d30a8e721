"""Configuration model for jj-prompt.

RenderConfig is built once at startup from the command-line options and
handed to every component explicitly.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, PositiveInt


class RenderConfig(BaseModel):
    """Read-only settings for one prompt render."""

    model_config = {"frozen": True}

    cwd: Path = Field(default_factory=Path.cwd)
    id_length: PositiveInt = 4
    symbol: str = " "
    color_enabled: bool = True
    include_file_count: bool = True
    highlight_length: PositiveInt = 2  # bold accent on this many id chars
