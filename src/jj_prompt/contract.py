"""Command and template contract with the ``jj`` binary.

Everything this package knows about jj's command line and template
language lives here.  A change in jj's template syntax or in the field
layout is an edit to :data:`DEFAULT_CONTRACT`, not to the parser.

The status template emits one line of five fields::

    <change id>|<bookmark>,<bookmark>|<conflict>|<divergent>|<description head>

The description is always last so that delimiter characters inside it
survive the split.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JJContract:
    """Fixed arguments, template and tokens used to talk to jj.

    Attributes:
        program: Executable name, resolved on PATH.
        global_args: Arguments passed to every invocation.  All of them keep
            jj read-only and its output machine-friendly.
        field_delimiter: Separator between the status fields.
        bookmark_delimiter: Separator inside the bookmark field.
        true_token: Token the template prints for a true boolean.
        false_token: Token the template prints for a false boolean.
        change_id_expr: Template expression for the change identifier.
        bookmarks_expr: Template expression for the local bookmark names,
            without the join.
        conflict_expr: Template keyword for the conflict flag.
        divergent_expr: Template keyword for the divergence flag.
        description_expr: Template expression for the description head.
        file_count_args: Subcommand that summarizes changed files.
    """

    program: str = "jj"
    global_args: tuple[str, ...] = (
        "--ignore-working-copy",
        "--color=never",
        "--no-pager",
    )
    field_delimiter: str = "|"
    bookmark_delimiter: str = ","
    true_token: str = "true"
    false_token: str = "false"
    change_id_expr: str = "change_id"  # full id; truncation happens at render time
    bookmarks_expr: str = "local_bookmarks.map(|b| b.name())"
    conflict_expr: str = "conflict"
    divergent_expr: str = "divergent"
    description_expr: str = "description.first_line()"
    file_count_args: tuple[str, ...] = ("diff", "--stat", "-r", "@")

    @property
    def status_template(self) -> str:
        """The jj template producing the one-line status record."""
        flag = 'if({expr}, "{true}", "{false}")'
        parts = [
            self.change_id_expr,
            f'{self.bookmarks_expr}.join("{self.bookmark_delimiter}")',
            flag.format(expr=self.conflict_expr, true=self.true_token, false=self.false_token),
            flag.format(expr=self.divergent_expr, true=self.true_token, false=self.false_token),
            self.description_expr,
        ]
        return f' ++ "{self.field_delimiter}" ++ '.join(parts)

    def status_args(self) -> list[str]:
        """Arguments for the status query (without the program name)."""
        return [
            *self.global_args,
            "log",
            "--no-graph",
            "-r",
            "@",
            "-T",
            self.status_template,
        ]

    def file_count_command(self) -> list[str]:
        """Arguments for the file-count query (without the program name)."""
        return [*self.global_args, *self.file_count_args]


DEFAULT_CONTRACT = JJContract()

# Fields that must be present before the optional description.
REQUIRED_FIELDS = 4

# Directory jj keeps at the root of every workspace.
WORKSPACE_MARKER = ".jj"
