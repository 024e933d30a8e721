"""Data models for jj-prompt."""

from jj_prompt.models.config import RenderConfig
from jj_prompt.models.status import StatusRecord

__all__ = ["RenderConfig", "StatusRecord"]
