"""
Output formatters for CLI display.

Supports human-readable, JSON, and markdown output modes for lists of
records (dataclasses or dicts). Human mode is rendered by the caller.
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Callable, Dict, Sequence


class OutputFormat(str, Enum):
    HUMAN = "human"
    JSON = "json"
    MARKDOWN = "markdown"


def format_records(
    records: Sequence[Any],
    human: Callable[[Sequence[Any]], str],
    fmt: OutputFormat = OutputFormat.HUMAN,
) -> str:
    """
    Format a list of records for display.

    Args:
        records: Dataclass instances or dicts
        human: Renderer for human mode
        fmt: Output mode
    """
    if fmt == OutputFormat.JSON:
        return _format_json(records)
    elif fmt == OutputFormat.MARKDOWN:
        return _format_markdown(records)
    else:
        return human(records)


def _to_dict(record: Any) -> Dict:
    if is_dataclass(record):
        return asdict(record)
    elif isinstance(record, dict):
        return record
    elif hasattr(record, "__dict__"):
        return record.__dict__
    return {"value": str(record)}


def _format_json(records: Sequence[Any]) -> str:
    return json.dumps([_to_dict(r) for r in records], indent=2, default=str)


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return "; ".join(
            ", ".join(f"{k}: {v}" for k, v in _to_dict(item).items()) for item in value
        ) or "-"
    return str(value)


def _format_markdown(records: Sequence[Any]) -> str:
    rows = [_to_dict(r) for r in records]
    if not rows:
        return ""

    keys = list(rows[0].keys())
    lines = [
        "| " + " | ".join(k.replace("_", " ").title() for k in keys) + " |",
        "|" + "|".join("---" for _ in keys) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_format_value(row.get(k, "")) for k in keys) + " |")

    return "\n".join(lines)
