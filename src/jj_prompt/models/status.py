"""Status record for the working-copy change."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StatusRecord:
    """Working-copy change state parsed from one status query.

    Attributes:
        change_id: Change identifier exactly as jj printed it.
        bookmarks: Local bookmark names in jj's output order.
        has_conflict: Whether the change records an unresolved conflict.
        is_divergent: Whether the change has several visible versions.
        description_head: First line of the description, or "".
    """

    change_id: str
    bookmarks: tuple[str, ...] = field(default_factory=tuple)
    has_conflict: bool = False
    is_divergent: bool = False
    description_head: str = ""

    def short_id(self, length: int) -> str:
        """Return the first ``length`` characters of the change id."""
        return self.change_id[:length]

    @property
    def status_glyph(self) -> str:
        """``>`` for a conflict, else ``\\`` for divergence, else ""."""
        if self.has_conflict:
            return ">"
        if self.is_divergent:
            return "\\"
        return ""

    def __str__(self) -> str:
        parts = [self.change_id, *self.bookmarks, self.status_glyph, self.description_head]
        return " ".join(p for p in parts if p)
