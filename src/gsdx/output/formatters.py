"""Text/JSON output helpers.

The CLI renders ServiceResult for humans (key-value text) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gsdx.services.result import ServiceResult


def _compact(value: Any) -> str:
    return _json.dumps(value, separators=(",", ":"))


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs.

    Lists of records (stories, tasks) get one line per record.
    """
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            lines.append(f"  {key}:")
            lines.extend(f"    - {_compact(item)}" for item in value)
        elif isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_compact(value)}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    if result.error is None:
        return f"ERROR: {result.op} — Unknown error"
    return f"ERROR: {result.op} — [{result.error.code}] {result.error.message}"
