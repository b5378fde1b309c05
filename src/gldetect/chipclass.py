"""Hardware generations, partitioned into contiguous per-vendor ranges.

The integer values are load-bearing: threshold rules compare generations
with ``<`` and family membership is a range check between a family's first
generation and its ``UNKNOWN_*`` sentinel.
"""

from __future__ import annotations

from enum import IntEnum


class ChipClass(IntEnum):
    # Radeon
    R100 = 0  # GL1.3         DX7                   2001
    R200 = 1  # GL1.4         DX8.1     SM 1.4      2002
    R300 = 2  # GL2.0         DX9       SM 2.0      2002
    R400 = 3  # GL2.0         DX9b      SM 2.0b     2004
    R500 = 4  # GL2.0         DX9c      SM 3.0      2005
    R600 = 5  # GL3.3         DX10      SM 4.0      2006
    R700 = 6  # GL3.3         DX10.1    SM 4.1      2008
    EVERGREEN = 7  # GL4.0  CL1.0  DX11      SM 5.0      2009
    NORTHERN_ISLANDS = 8  # GL4.0  CL1.1  DX11      SM 5.0      2010
    UNKNOWN_RADEON = 999

    # NVIDIA
    NV10 = 1000  # GL1.2         DX7                   1999
    NV20 = 1001  # GL1.3         DX8       SM 1.1      2001
    NV30 = 1002  # GL1.5         DX9a      SM 2.0      2003
    NV40 = 1003  # GL2.1         DX9c      SM 3.0      2004
    G80 = 1004  # GL3.3         DX10      SM 4.0      2006
    GF100 = 1005  # GL4.1  CL1.1  DX11      SM 5.0      2010
    UNKNOWN_NVIDIA = 1999

    # Intel
    I8XX = 2000  # GL1.3         DX7                   2001
    I915 = 2001  # GL1.4/1.5     DX9/DX9c  SM 2.0      2004
    I965 = 2002  # GL2.0/2.1     DX9/DX10  SM 3.0/4.0  2006
    SANDY_BRIDGE = 2003  # GL3.1  CL1.1  DX10.1    SM 4.0      2010
    IVY_BRIDGE = 2004  # GL4.0  CL1.1  DX11      SM 5.0      2012
    HASWELL = 2005  # GL4.0  CL1.2  DX11.1    SM 5.0      2013
    UNKNOWN_INTEL = 2999

    # Qualcomm Adreno
    ADRENO_1XX = 3000
    ADRENO_2XX = 3001
    ADRENO_3XX = 3002
    ADRENO_4XX = 3003
    ADRENO_5XX = 3004
    UNKNOWN_ADRENO = 3999

    UNKNOWN = 99999


RADEON_RANGE = (ChipClass.R100, ChipClass.UNKNOWN_RADEON)
NVIDIA_RANGE = (ChipClass.NV10, ChipClass.UNKNOWN_NVIDIA)
INTEL_RANGE = (ChipClass.I8XX, ChipClass.UNKNOWN_INTEL)
ADRENO_RANGE = (ChipClass.ADRENO_1XX, ChipClass.UNKNOWN_ADRENO)


def _in_range(chip_class: ChipClass, bounds: tuple[ChipClass, ChipClass]) -> bool:
    first, last = bounds
    return first <= chip_class <= last


def is_radeon(chip_class: ChipClass) -> bool:
    return _in_range(chip_class, RADEON_RANGE)


def is_nvidia(chip_class: ChipClass) -> bool:
    return _in_range(chip_class, NVIDIA_RANGE)


def is_intel(chip_class: ChipClass) -> bool:
    return _in_range(chip_class, INTEL_RANGE)


def is_adreno(chip_class: ChipClass) -> bool:
    return _in_range(chip_class, ADRENO_RANGE)


_DISPLAY_NAMES: dict[ChipClass, str] = {
    ChipClass.R100: "R100",
    ChipClass.R200: "R200",
    ChipClass.R300: "R300",
    ChipClass.R400: "R400",
    ChipClass.R500: "R500",
    ChipClass.R600: "R600",
    ChipClass.R700: "R700",
    ChipClass.EVERGREEN: "EVERGREEN",
    ChipClass.NORTHERN_ISLANDS: "NI",
    ChipClass.NV10: "NV10",
    ChipClass.NV20: "NV20",
    ChipClass.NV30: "NV30",
    ChipClass.NV40: "NV40/G70",
    ChipClass.G80: "G80/G90",
    ChipClass.GF100: "GF100",
    ChipClass.I8XX: "i830/i835",
    ChipClass.I915: "i915/i945",
    ChipClass.I965: "i965",
    ChipClass.SANDY_BRIDGE: "SandyBridge",
    ChipClass.IVY_BRIDGE: "IvyBridge",
    ChipClass.HASWELL: "Haswell",
    ChipClass.ADRENO_1XX: "Adreno 1xx series",
    ChipClass.ADRENO_2XX: "Adreno 2xx series",
    ChipClass.ADRENO_3XX: "Adreno 3xx series",
    ChipClass.ADRENO_4XX: "Adreno 4xx series",
    ChipClass.ADRENO_5XX: "Adreno 5xx series",
}

_BY_NAME: dict[str, ChipClass] = {name: chip for chip, name in _DISPLAY_NAMES.items()}

UNKNOWN_NAME = "Unknown"


def chip_class_to_string(chip_class: ChipClass) -> str:
    """Return the stable display name; every unknown class renders as ``Unknown``."""
    return _DISPLAY_NAMES.get(chip_class, UNKNOWN_NAME)


def chip_class_from_string(name: str) -> ChipClass:
    """Inverse of :func:`chip_class_to_string`. Unrecognized names map to ``UNKNOWN``."""
    return _BY_NAME.get(name.strip(), ChipClass.UNKNOWN)
