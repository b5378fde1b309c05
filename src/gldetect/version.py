"""Version numbers as reported by OpenGL drivers and the kernel.

Driver strings bury their versions in free-form text
(``"4.5.0 NVIDIA 361.45"``, ``"OpenGL ES 3.1 Mesa 20.1"``). Parsing never
fails: anything unreadable degrades to ``0.0.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAJOR_MAX = 0xFFFFFFFF
_FIELD_MAX = 0xFFFF

_VERSION_RUN_RE = re.compile(r"[0-9][0-9.]*")


def _component(token: str, limit: int) -> int:
    if not token.isdigit():
        return 0
    value = int(token)
    return value if value <= limit else 0


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


@dataclass(frozen=True, order=True)
class VersionNumber:
    """A ``major.minor.patch`` triple ordered lexicographically."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        # packed order must agree with triple order
        if not 0 <= self.major <= _MAJOR_MAX:
            raise ValueError(f"major version out of range: {self.major}")
        for name in ("minor", "patch"):
            value = getattr(self, name)
            if not 0 <= value <= _FIELD_MAX:
                raise ValueError(f"{name} version out of range: {value}")

    def __bool__(self) -> bool:
        return (self.major, self.minor, self.patch) != (0, 0, 0)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}"
        if self.patch != 0:
            text += f".{self.patch}"
        return text

    def pack(self) -> int:
        """Return the 64-bit packed form (major:32, minor:16, patch:16)."""
        return (self.major << 32) | (self.minor << 16) | self.patch

    @classmethod
    def unpack(cls, packed: int) -> VersionNumber:
        return cls(packed >> 32, (packed >> 16) & _FIELD_MAX, packed & _FIELD_MAX)

    @classmethod
    def parse(cls, text: str | bytes | None) -> VersionNumber:
        """Extract the first ``digits[.digits[.digits]]`` run from *text*.

        Missing components default to 0; empty or oversized components parse
        as 0. Text without any digit yields ``0.0.0``.
        """
        match = _VERSION_RUN_RE.search(_as_text(text))
        if match is None:
            return cls()
        tokens = match.group(0).split(".")
        major = _component(tokens[0], _MAJOR_MAX)
        minor = _component(tokens[1], _FIELD_MAX) if len(tokens) > 1 else 0
        patch = _component(tokens[2], _FIELD_MAX) if len(tokens) > 2 else 0
        return cls(major, minor, patch)

    @classmethod
    def from_string(cls, text: str) -> VersionNumber:
        """Inverse of ``str()``: read a canonical ``major.minor[.patch]`` string."""
        return cls.parse(text)
