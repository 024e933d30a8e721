"""Rich formatting for the prompt line.

The line layout is fixed::

    <symbol><change id> <bookmarks> <glyph> ~<file count> <description>

Every token after the change id is optional and, when omitted, takes its
separating space with it.  Colors follow jj's own defaults: a bold
magenta accent on the leading characters of the change id and gray for the
rest, magenta bookmarks, dim file count and description.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from jj_prompt.models.config import RenderConfig
    from jj_prompt.models.status import StatusRecord

SYMBOL_STYLE = "green"
CHANGE_ID_PREFIX_STYLE = "bold color(5)"
CHANGE_ID_REST_STYLE = "color(8)"
BOOKMARK_STYLE = "color(5)"
DIM_STYLE = "dim"

SEPARATOR = " "


def render_status(
    record: StatusRecord,
    file_count: int | None,
    config: RenderConfig,
) -> Text:
    """Compose the prompt line as styled text.

    Args:
        record: Parsed working-copy status.
        file_count: Changed-file count, or None when it was not probed.
            Zero renders nothing.
        config: Render settings (symbol, id length, highlight length).
    """
    text = Text(no_wrap=True, end="")
    text.append(config.symbol, style=SYMBOL_STYLE)

    change_id = record.short_id(config.id_length)
    split = min(config.highlight_length, len(change_id))
    text.append(change_id[:split], style=CHANGE_ID_PREFIX_STYLE)
    text.append(change_id[split:], style=CHANGE_ID_REST_STYLE)

    tokens: list[tuple[str, str]] = []
    if record.bookmarks:
        tokens.append((SEPARATOR.join(record.bookmarks), BOOKMARK_STYLE))
    if record.status_glyph:
        tokens.append((record.status_glyph, ""))
    if file_count:
        tokens.append((f"~{file_count}", DIM_STYLE))
    description = record.description_head.strip()
    if description:
        tokens.append((description, DIM_STYLE))

    for token, style in tokens:
        text.append(SEPARATOR)
        text.append(token, style=style)

    # Console output expands tabs; do it here so .plain agrees.
    text.expand_tabs()
    return text


def to_ansi(text: Text, color_enabled: bool = True) -> str:
    """Flatten styled text to a string, with ANSI escapes when color is on."""
    if not color_enabled:
        return text.plain
    buffer = StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system="256",
        soft_wrap=True,
        highlight=False,
        no_color=False,
    )
    console.print(text, end="")
    return buffer.getvalue()


def format_prompt(
    record: StatusRecord,
    file_count: int | None,
    config: RenderConfig,
) -> str:
    """Render the final prompt string for ``config``."""
    return to_ansi(render_status(record, file_count, config), config.color_enabled)
