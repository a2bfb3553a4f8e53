"""Text/JSON output helpers.

The CLI renders a Report for humans or for machines (--json). The
formatter layer adapts a Report to the requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from getflowkit.output.report import Report


def _format_data_human(data: dict[str, Any]) -> str:
    """Format report data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_report(report: Report, *, json_output: bool = False) -> str:
    """Format a Report for display.

    Args:
        report: The report to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return report.model_dump_json(indent=2)
    if report.ok:
        parts = [f"OK: {report.op}"]
        if report.data:
            parts.append(_format_data_human(report.data))
        return "\n".join(parts)
    error_msg = report.error.message if report.error else "Unknown error"
    return f"ERROR: {report.op} - {error_msg}"
