"""Driver stacks that can back an OpenGL context."""

from __future__ import annotations

from enum import Enum


class DriverKind(Enum):
    R100 = "r100"  # Mesa classic "Radeon"
    R200 = "r200"
    R300C = "r300c"
    R300G = "r300g"
    R600C = "r600c"
    R600G = "r600g"
    NOUVEAU = "nouveau"
    INTEL = "intel"
    NVIDIA = "nvidia"
    CATALYST = "catalyst"
    SWRAST = "swrast"
    SOFTPIPE = "softpipe"
    LLVMPIPE = "llvmpipe"
    VIRTUALBOX = "virtualbox"
    VMWARE = "vmware"
    QUALCOMM = "qualcomm"
    UNKNOWN = "unknown"


SOFTWARE_DRIVERS = frozenset({DriverKind.SWRAST, DriverKind.SOFTPIPE, DriverKind.LLVMPIPE})
# Software rasterizers that cannot compile shaders at all.
NON_JIT_SOFTWARE_DRIVERS = frozenset({DriverKind.SWRAST, DriverKind.SOFTPIPE})
VIRTUAL_MACHINE_DRIVERS = frozenset({DriverKind.VIRTUALBOX, DriverKind.VMWARE})

_DISPLAY_NAMES: dict[DriverKind, str] = {
    DriverKind.R100: "Radeon",
    DriverKind.R200: "R200",
    DriverKind.R300C: "R300C",
    DriverKind.R300G: "R300G",
    DriverKind.R600C: "R600C",
    DriverKind.R600G: "R600G",
    DriverKind.NOUVEAU: "Nouveau",
    DriverKind.INTEL: "Intel",
    DriverKind.NVIDIA: "NVIDIA",
    DriverKind.CATALYST: "Catalyst",
    DriverKind.SWRAST: "Software rasterizer",
    DriverKind.SOFTPIPE: "softpipe",
    DriverKind.LLVMPIPE: "LLVMpipe",
    DriverKind.VIRTUALBOX: "VirtualBox (Chromium)",
    DriverKind.VMWARE: "VMware (SVGA3D)",
    DriverKind.QUALCOMM: "Qualcomm",
    DriverKind.UNKNOWN: "Unknown",
}

_BY_NAME: dict[str, DriverKind] = {name: kind for kind, name in _DISPLAY_NAMES.items()}


def driver_to_string(driver: DriverKind) -> str:
    return _DISPLAY_NAMES.get(driver, "Unknown")


def driver_from_string(name: str) -> DriverKind:
    """Inverse of :func:`driver_to_string`. Unrecognized names map to ``UNKNOWN``."""
    return _BY_NAME.get(name.strip(), DriverKind.UNKNOWN)
