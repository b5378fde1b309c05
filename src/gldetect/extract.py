"""Substring extraction used by the chipset classifiers."""

from __future__ import annotations

import re

# HD followed by a space and 4 digits
RADEON_HD_RE = re.compile(r"HD [0-9]{4}")
# X followed by 3-4 digits
RADEON_X_RE = re.compile(r"X[0-9]{3,4}")
# A bare group of 4 digits
FOUR_DIGITS_RE = re.compile(r"\b[0-9]{4}\b")
# NV followed by two hexadecimal digits
NV_CODE_RE = re.compile(r"\bNV[0-9A-F]{2}\b")
# GeForce 5, 6, 7, 8, 9 series
GEFORCE_4DIGIT_RE = re.compile(r"GeForce (FX |PCX |Go )?\d{4}(M|\b)")
# GeForce 100, 200, 300, 400, 500 series
GEFORCE_3DIGIT_RE = re.compile(r"GeForce (G |GT |GTX |GTS )?\d{3}(M|\b)")


def extract(text: str, pattern: re.Pattern[str] | str) -> str:
    """Return the leftmost substring of *text* matching *pattern*, or ``""``."""
    match = re.search(pattern, text)
    if match is None:
        return ""
    return match.group(0)


def trailing_number(name: str, width: int) -> int:
    """Read the last *width* digits of an extracted model name.

    A trailing non-digit suffix (the ``M`` of mobile parts) is dropped first.
    """
    name = name.strip()
    if name and not name[-1].isdigit():
        name = name[:-1]
    digits = name[-width:]
    return int(digits) if digits.isdigit() else 0
