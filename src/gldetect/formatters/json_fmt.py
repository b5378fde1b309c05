"""JSON output formatter for gldetect."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any, TextIO

from gldetect.driver import DriverKind, driver_to_string
from gldetect.version import VersionNumber


def _default(value: Any) -> Any:
    if isinstance(value, VersionNumber):
        return str(value)
    if isinstance(value, DriverKind):
        return driver_to_string(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return str(value)


def write_json(data: Any, *, out: TextIO | None = None, indent: int = 2) -> None:
    """Write data as formatted JSON to the given output stream."""
    dest = out or sys.stdout
    dest.write(json.dumps(data, default=_default, indent=indent) + "\n")
