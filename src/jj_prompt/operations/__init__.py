"""Operations against a jj working copy: status, file count, detection."""

from jj_prompt.operations.detection import detect, find_workspace_root
from jj_prompt.operations.file_count import parse_file_count, probe_file_count
from jj_prompt.operations.status import parse_status, query_status

__all__ = [
    "detect",
    "find_workspace_root",
    "parse_file_count",
    "parse_status",
    "probe_file_count",
    "query_status",
]
