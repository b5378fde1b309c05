"""Per-vendor chipset classifiers.

Each vendor family is an ordered table of :class:`ChipRule` objects evaluated
first-match-wins. A rule returns a :class:`ChipClass` to stop the search or
``None`` to fall through to the next rule. Literal codename rules come before
numeric model-number rules because the numbers are ambiguous across eras.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gldetect.chipclass import ChipClass
from gldetect.extract import (
    FOUR_DIGITS_RE,
    GEFORCE_3DIGIT_RE,
    GEFORCE_4DIGIT_RE,
    NV_CODE_RE,
    RADEON_HD_RE,
    RADEON_X_RE,
    extract,
    trailing_number,
)

log = logging.getLogger(__name__)

# (low inclusive, high exclusive or None for unbounded, result)
NumberRange = tuple[int, int | None, ChipClass]


@dataclass(frozen=True)
class ChipRule:
    name: str
    apply: Callable[[str], ChipClass | None]


def codename_rule(result: ChipClass, names: Sequence[str]) -> ChipRule:
    """Match when the text contains any of *names*."""
    names = tuple(names)

    def _apply(text: str) -> ChipClass | None:
        return result if any(name in text for name in names) else None

    return ChipRule(f"codename:{result.name}", _apply)


def lookup_ranges(ranges: Sequence[NumberRange]) -> Callable[[int], ChipClass | None]:
    """Build a number -> class lookup; the first containing range wins."""
    ranges = tuple(ranges)

    def _lookup(number: int) -> ChipClass | None:
        for low, high, result in ranges:
            if number >= low and (high is None or number < high):
                return result
        return None

    return _lookup


def pattern_rule(
    name: str,
    pattern: re.Pattern[str],
    read: Callable[[str], int],
    lookup: Callable[[int], ChipClass | None],
    miss: ChipClass | None,
) -> ChipRule:
    """Extract a model number with *pattern* and map it through *lookup*.

    When the pattern matches but *lookup* has no answer the rule returns
    *miss*, so a recognised-but-unmapped model number does not fall through
    to less specific rules unless *miss* is ``None``.
    """

    def _apply(text: str) -> ChipClass | None:
        found = extract(text, pattern)
        if not found:
            return None
        result = lookup(read(found))
        return result if result is not None else miss

    return ChipRule(name, _apply)


def run_rules(rules: Sequence[ChipRule], text: str, default: ChipClass) -> ChipClass:
    for rule in rules:
        result = rule.apply(text)
        if result is not None:
            log.debug("chip rule %s matched %r -> %s", rule.name, text, result.name)
            return result
    return default


# ── Radeon ───────────────────────────────────────────────────────────


def _empty_radeon(text: str) -> ChipClass | None:
    return ChipClass.UNKNOWN_RADEON if not text else None


RADEON_RULES: tuple[ChipRule, ...] = (
    ChipRule("empty", _empty_radeon),
    codename_rule(ChipClass.R100, ["R100", "RV100", "RS100"]),
    codename_rule(ChipClass.R200, ["RV200", "RS200", "R200", "RV250", "RS300", "RV280"]),
    codename_rule(ChipClass.R300, ["R300", "R350", "R360", "RV350", "RV370", "RV380"]),
    codename_rule(
        ChipClass.R400,
        [
            "R420",
            "R423",
            "R430",
            "R480",
            "R481",
            "RV410",
            "RS400",
            "RC410",
            "RS480",
            "RS482",
            "RS600",
            "RS690",
            "RS740",
        ],
    ),
    codename_rule(ChipClass.R500, ["RV515", "R520", "RV530", "R580", "RV560", "RV570"]),
    codename_rule(
        ChipClass.R600,
        ["R600", "RV610", "RV630", "RV670", "RV620", "RV635", "RS780", "RS880"],
    ),
    codename_rule(ChipClass.R700, ["R700", "RV770", "RV730", "RV710", "RV740"]),
    # EVERGREEN is not a chipset, but older r600g releases report it
    codename_rule(
        ChipClass.EVERGREEN,
        ["EVERGREEN", "CEDAR", "REDWOOD", "JUNIPER", "CYPRESS", "HEMLOCK", "PALM"],
    ),
    codename_rule(
        ChipClass.NORTHERN_ISLANDS,
        ["SUMO", "SUMO2", "BARTS", "TURKS", "CAICOS", "CAYMAN"],
    ),
    pattern_rule(
        "radeon-hd",
        RADEON_HD_RE,
        lambda name: trailing_number(name, 4),
        lookup_ranges(
            [
                (6250, 6251, ChipClass.EVERGREEN),  # Palm
                (6310, 6311, ChipClass.EVERGREEN),  # Palm
                (6000, 7000, ChipClass.NORTHERN_ISLANDS),
                (5000, 6000, ChipClass.EVERGREEN),
                (4000, 5000, ChipClass.R700),
                (2000, 4000, ChipClass.R600),
            ]
        ),
        ChipClass.UNKNOWN_RADEON,
    ),
    pattern_rule(
        "radeon-x",
        RADEON_X_RE,
        lambda name: int(name[1:]),
        lookup_ranges(
            [
                (1300, None, ChipClass.R500),  # X1xxx
                (700, 1000, ChipClass.R400),  # X7xx, X8xx
                (1200, None, ChipClass.R400),  # X12xx
                (300, 700, ChipClass.R300),  # X3xx, X5xx, X6xx
                (1000, 1200, ChipClass.R300),  # X10xx, X11xx
            ]
        ),
        ChipClass.UNKNOWN_RADEON,
    ),
    pattern_rule(
        "radeon-4digit",
        FOUR_DIGITS_RE,
        int,
        lookup_ranges(
            [
                (7000, 8000, ChipClass.R100),
                (8000, 9500, ChipClass.R200),
                (9500, None, ChipClass.R300),
                (2100, 2101, ChipClass.R400),
            ]
        ),
        ChipClass.UNKNOWN_RADEON,
    ),
)


def classify_radeon(chipset: str) -> ChipClass:
    return run_rules(RADEON_RULES, chipset, ChipClass.UNKNOWN_RADEON)


# ── NVIDIA ───────────────────────────────────────────────────────────

_NV_NIBBLES: dict[int, ChipClass] = {
    0x00: ChipClass.NV10,
    0x10: ChipClass.NV10,
    0x20: ChipClass.NV20,
    0x30: ChipClass.NV30,
    0x40: ChipClass.NV40,
    0x60: ChipClass.NV40,
    0x50: ChipClass.G80,
    0x80: ChipClass.G80,
    0x90: ChipClass.G80,
    0xA0: ChipClass.G80,
}

# GeForce4 parts that are really NV1x-class hardware
_GEFORCE4_MX = ("MX 420", "MX 440", "MX 460", "MX 4000", "PCX 4300")


def _geforce4(text: str) -> ChipClass | None:
    if "GeForce4" not in text:
        return None
    if any(name in text for name in _GEFORCE4_MX):
        return ChipClass.NV10
    return ChipClass.NV20


NVIDIA_RULES: tuple[ChipRule, ...] = (
    pattern_rule(
        "nv-code",
        NV_CODE_RE,
        lambda name: int(name[2:], 16),
        lambda code: _NV_NIBBLES.get(code & 0xF0),
        ChipClass.UNKNOWN_NVIDIA,
    ),
    codename_rule(ChipClass.NV10, ["GeForce2", "GeForce 256"]),
    codename_rule(ChipClass.NV20, ["GeForce3"]),
    ChipRule("geforce4", _geforce4),
    pattern_rule(
        "geforce-4digit",
        GEFORCE_4DIGIT_RE,
        lambda name: trailing_number(name, 4),
        lookup_ranges(
            [
                (0, 6000, ChipClass.NV30),
                (6000, 8000, ChipClass.NV40),
                (8000, None, ChipClass.G80),
            ]
        ),
        ChipClass.UNKNOWN_NVIDIA,
    ),
    pattern_rule(
        "geforce-3digit",
        GEFORCE_3DIGIT_RE,
        lambda name: trailing_number(name, 3),
        lookup_ranges(
            [
                (400, 600, ChipClass.GF100),
                (100, 400, ChipClass.G80),
            ]
        ),
        ChipClass.UNKNOWN_NVIDIA,
    ),
)


def classify_nvidia(chipset: str) -> ChipClass:
    return run_rules(NVIDIA_RULES, chipset, ChipClass.UNKNOWN_NVIDIA)


# ── Intel ────────────────────────────────────────────────────────────
# Codenames as reported by Mesa's i915/i965 DRI drivers.

INTEL_RULES: tuple[ChipRule, ...] = (
    codename_rule(ChipClass.I8XX, ["845G", "830M", "852GM/855GM", "865G"]),
    codename_rule(
        ChipClass.I915,
        [
            "915G",
            "E7221G",
            "915GM",
            "945G",
            "945GM",
            "945GME",
            "Q33",
            "Q35",
            "G33",
            # GMA 3000, but the driver treats them as gen 3
            "965Q",
            "946GZ",
            "IGD",
        ],
    ),
    codename_rule(
        ChipClass.I965,
        ["965G", "G45/G43", "965GM", "965GME/GLE", "GM45", "Q45/Q43", "G41", "B43", "Ironlake"],
    ),
    codename_rule(ChipClass.SANDY_BRIDGE, ["Sandybridge"]),
    codename_rule(ChipClass.IVY_BRIDGE, ["Ivybridge"]),
    codename_rule(ChipClass.HASWELL, ["Haswell"]),
)


def classify_intel(chipset: str) -> ChipClass:
    return run_rules(INTEL_RULES, chipset, ChipClass.UNKNOWN_INTEL)


# ── Qualcomm Adreno ──────────────────────────────────────────────────

_ADRENO_MODEL_RE = re.compile(r"[+-]?[0-9]+")

_adreno_series = lookup_ranges(
    [
        (100, 200, ChipClass.ADRENO_1XX),
        (200, 300, ChipClass.ADRENO_2XX),
        (300, 400, ChipClass.ADRENO_3XX),
        (400, 500, ChipClass.ADRENO_4XX),
        (500, 600, ChipClass.ADRENO_5XX),
    ]
)


def classify_adreno(renderer: str) -> ChipClass:
    """Classify ``"Adreno (TM) 330"``-style renderer strings.

    Text without ``Adreno`` is not an Adreno part at all and yields
    ``ChipClass.UNKNOWN`` rather than ``UNKNOWN_ADRENO``.
    """
    if "Adreno" not in renderer:
        return ChipClass.UNKNOWN
    parts = renderer.split()
    if len(parts) < 3 or not _ADRENO_MODEL_RE.fullmatch(parts[2]):
        return ChipClass.UNKNOWN_ADRENO
    return _adreno_series(int(parts[2])) or ChipClass.UNKNOWN_ADRENO


VENDOR_CLASSIFIERS: dict[str, Callable[[str], ChipClass]] = {
    "radeon": classify_radeon,
    "nvidia": classify_nvidia,
    "intel": classify_intel,
    "adreno": classify_adreno,
}
