"""Platform abstraction layer for gldetect.

Centralises all OS-specific behaviour behind a single module so that
callers never need ``sys.platform`` checks themselves.
"""

from __future__ import annotations

import platform
import sys

from gldetect.version import VersionNumber

_LINUX: bool = sys.platform.startswith("linux")


def kernel_release() -> str:
    """Return the raw kernel release string (``uname -r``)."""
    return platform.release()


def kernel_version() -> VersionNumber:
    """Return the running Linux kernel version; 0.0 on other systems."""
    if not _LINUX:
        return VersionNumber()
    return VersionNumber.parse(kernel_release())
