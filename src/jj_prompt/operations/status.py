"""Status operations: query jj for the working-copy change and parse it."""
from __future__ import annotations

from pathlib import Path

from jj_prompt.contract import DEFAULT_CONTRACT, REQUIRED_FIELDS, JJContract
from jj_prompt.exceptions import MalformedOutputError
from jj_prompt.models.status import StatusRecord
from jj_prompt.process import run_command


def _parse_flag(token: str, contract: JJContract, output: str) -> bool:
    if token == contract.true_token:
        return True
    if token == contract.false_token:
        return False
    raise MalformedOutputError(output, f"unexpected flag token {token!r}")


def parse_status(output: str, contract: JJContract = DEFAULT_CONTRACT) -> StatusRecord:
    """Parse one status line produced by ``contract.status_template``.

    Fields are positional.  The description is the trailing field and may
    be absent, in which case it is "".  An empty bookmark field yields no
    bookmarks.

    Raises:
        MalformedOutputError: Fewer fields than the template emits, an
            empty change id, or an unknown flag token.
    """
    fields = output.split(contract.field_delimiter, REQUIRED_FIELDS)
    if len(fields) < REQUIRED_FIELDS:
        raise MalformedOutputError(
            output, f"expected at least {REQUIRED_FIELDS} fields, got {len(fields)}"
        )

    change_id, bookmark_field, conflict, divergent = fields[:REQUIRED_FIELDS]
    if not change_id:
        raise MalformedOutputError(output, "empty change id")

    bookmarks = (
        tuple(bookmark_field.split(contract.bookmark_delimiter)) if bookmark_field else ()
    )
    description = fields[REQUIRED_FIELDS] if len(fields) > REQUIRED_FIELDS else ""

    return StatusRecord(
        change_id=change_id,
        bookmarks=bookmarks,
        has_conflict=_parse_flag(conflict, contract, output),
        is_divergent=_parse_flag(divergent, contract, output),
        description_head=description,
    )


def query_status(cwd: Path | None, contract: JJContract = DEFAULT_CONTRACT) -> StatusRecord:
    """Run the status query in ``cwd`` and parse its output.

    Errors from the invocation propagate unchanged; this query is the one
    the prompt cannot do without.
    """
    output = run_command(contract.program, contract.status_args(), cwd=cwd)
    return parse_status(output, contract)
