"""Prompt pipeline: status query, optional file count, render.

Each call is a fresh, read-only query.  Nothing is cached between runs.
"""
from __future__ import annotations

import logging

from jj_prompt.contract import DEFAULT_CONTRACT, JJContract
from jj_prompt.formatting import format_prompt
from jj_prompt.models.config import RenderConfig
from jj_prompt.operations.file_count import probe_file_count
from jj_prompt.operations.status import query_status

logger = logging.getLogger(__name__)


def build_prompt(config: RenderConfig, contract: JJContract = DEFAULT_CONTRACT) -> str:
    """Return the full prompt line for ``config.cwd``.

    The status query is mandatory and its errors propagate.  The file
    count is only probed when ``config.include_file_count`` is set, and a
    failed probe renders the line without it.

    Raises:
        JJPromptError: The status query failed or its output was malformed.
    """
    record = query_status(config.cwd, contract)
    logger.debug("status: %s", record)

    file_count = None
    if config.include_file_count:
        file_count = probe_file_count(config.cwd, contract)

    return format_prompt(record, file_count, config)
