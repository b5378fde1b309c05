"""Key-value pair formatting (aligned columns)."""

from __future__ import annotations

import sys
from typing import Any, TextIO


def format_kv(data: dict[str, Any], *, width: int | None = None, empty: str = "-") -> str:
    """Format a dict as aligned key-value pairs.

    Labels are padded to *width* columns, or to the longest key plus two
    when *width* is not given. Non-dict or empty input falls through to
    str(). None and empty-string values render as *empty*.
    """
    if not isinstance(data, dict) or not data:
        return str(data)
    if width is None:
        width = max(len(str(k)) for k in data) + 2
    lines: list[str] = []
    for k, v in data.items():
        if v is None or v == "":
            v = empty
        label = str(k) + ":"
        lines.append(f"{label:<{width}}{v}")
    return "\n".join(lines)


def write_kv(data: dict[str, Any], out: TextIO | None = None, *, width: int | None = None) -> None:
    """Format a dict as aligned key-value pairs and write to a stream."""
    dest = out or sys.stdout
    dest.write(format_kv(data, width=width) + "\n")
