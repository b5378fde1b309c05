"""Driver identification from the GL vendor/renderer/version strings.

The decision procedure is an ordered tuple of :class:`DriverRule` entries:
the first rule whose ``matches`` predicate accepts the strings decides the
driver. The last rule (Gallium and other Mesa drivers) always matches and
sub-routes through :data:`GALLIUM_ROUTES`.

Sample renderer strings::

    Mesa DRI R600 (RV740 94B3) 20090101 x86/MMX/SSE2 TCL DRI2
    Mesa DRI Mobile Intel® GM45 Express Chipset GEM 20100328 2010Q1
    Gallium 0.4 on AMD RV740
    GeForce GTX 480/PCIe/SSE2
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gldetect.chipclass import ChipClass
from gldetect.classifiers import (
    classify_adreno,
    classify_intel,
    classify_nvidia,
    classify_radeon,
)
from gldetect.driver import DriverKind
from gldetect.version import VersionNumber

log = logging.getLogger(__name__)

CATALYST_VENDOR = "ATI Technologies Inc."
NVIDIA_VENDOR = "NVIDIA Corporation"
QUALCOMM_VENDOR = "Qualcomm"
SWRAST_RENDERER = "Software Rasterizer"
VIRTUALBOX_VENDOR = "Humper"
VIRTUALBOX_RENDERER = "Chromium"
VMWARE_VENDOR = "VMware, Inc."
R300G_VENDOR = "X.Org R300 Project"
R600G_VENDOR = "X.Org"
NOUVEAU_VENDOR = "nouveau"

INTEL_IGD_PREFIX = "Intel(R) Integrated Graphics Device"

# Gallium reports no version of its own any more; it is at least 0.4.
GALLIUM_BASELINE = VersionNumber(0, 4, 0)

DEFAULT_CHIPSET = "Unknown"

_CLASSIC_RADEON_DRIVERS: dict[str, DriverKind] = {
    "R100": DriverKind.R100,
    "R200": DriverKind.R200,
    "R300": DriverKind.R300C,
    "R600": DriverKind.R600C,
}

R600G_MARKERS = (
    "R6",
    "R7",
    "RV6",
    "RV7",
    "RS780",
    "RS880",
    "CEDAR",
    "REDWOOD",
    "JUNIPER",
    "CYPRESS",
    "HEMLOCK",
    "PALM",
    "EVERGREEN",
    "SUMO",
    "SUMO2",
    "BARTS",
    "TURKS",
    "CAICOS",
    "CAYMAN",
)


@dataclass(frozen=True)
class DriverStrings:
    """The raw identification strings a rule looks at."""

    vendor: str
    renderer: str
    version: str

    @property
    def renderer_tokens(self) -> list[str]:
        return self.renderer.split(" ")

    @property
    def version_tokens(self) -> list[str]:
        return self.version.split(" ")


@dataclass(frozen=True)
class DriverIdentity:
    driver: DriverKind = DriverKind.UNKNOWN
    chip_class: ChipClass = ChipClass.UNKNOWN
    chipset: str = DEFAULT_CHIPSET
    driver_version: VersionNumber = field(default_factory=VersionNumber)
    gallium_version: VersionNumber = field(default_factory=VersionNumber)


@dataclass(frozen=True)
class DriverRule:
    name: str
    matches: Callable[[DriverStrings], bool]
    identify: Callable[[DriverStrings], DriverIdentity]


def token_at(tokens: list[str], index: int) -> str:
    """Return ``tokens[index]`` or ``""`` when the string is too short."""
    if 0 <= index < len(tokens):
        return tokens[index]
    return ""


def token_after(tokens: list[str], marker: str) -> str:
    """Return the token following the first *marker* token, or ``""``."""
    if marker not in tokens:
        return ""
    return token_at(tokens, tokens.index(marker) + 1)


# ── Mesa classic Radeon ──────────────────────────────────────────────


def _identify_classic_radeon(s: DriverStrings) -> DriverIdentity:
    tokens = s.renderer_tokens
    chipset = token_at(tokens, 3).removeprefix("(")
    return DriverIdentity(
        driver=_CLASSIC_RADEON_DRIVERS.get(token_at(tokens, 2), DriverKind.UNKNOWN),
        chip_class=classify_radeon(chipset),
        chipset=chipset,
    )


# ── Intel ────────────────────────────────────────────────────────────


def _identify_intel(s: DriverStrings) -> DriverIdentity:
    chipset = "IGD" if s.renderer.startswith(INTEL_IGD_PREFIX) else s.renderer
    return DriverIdentity(
        driver=DriverKind.INTEL,
        chip_class=classify_intel(chipset),
        chipset=chipset,
    )


# ── Proprietary drivers ──────────────────────────────────────────────


def _identify_catalyst(s: DriverStrings) -> DriverIdentity:
    tokens = s.version_tokens
    if token_at(tokens, 2).startswith("("):
        driver_version = VersionNumber.parse(token_at(tokens, 1))
    else:
        driver_version = VersionNumber.parse(token_at(tokens, 0))
    return DriverIdentity(
        driver=DriverKind.CATALYST,
        chip_class=classify_radeon(s.renderer),
        chipset=s.renderer,
        driver_version=driver_version,
    )


def _identify_nvidia(s: DriverStrings) -> DriverIdentity:
    return DriverIdentity(
        driver=DriverKind.NVIDIA,
        chip_class=classify_nvidia(s.renderer),
        chipset=s.renderer,
        driver_version=VersionNumber.parse(token_after(s.version_tokens, "NVIDIA")),
    )


def _identify_qualcomm(s: DriverStrings) -> DriverIdentity:
    return DriverIdentity(
        driver=DriverKind.QUALCOMM,
        chip_class=classify_adreno(s.renderer),
        chipset=s.renderer,
    )


def _identify_swrast(s: DriverStrings) -> DriverIdentity:
    return DriverIdentity(driver=DriverKind.SWRAST)


# ── Virtual hardware ─────────────────────────────────────────────────


def _identify_virtualbox(s: DriverStrings) -> DriverIdentity:
    return DriverIdentity(
        driver=DriverKind.VIRTUALBOX,
        driver_version=VersionNumber.parse(token_after(s.version_tokens, VIRTUALBOX_RENDERER)),
    )


# ── Gallium and other Mesa drivers ───────────────────────────────────


@dataclass(frozen=True)
class GalliumRoute:
    name: str
    matches: Callable[[DriverStrings, str], bool]
    driver: DriverKind
    classify: Callable[[str], ChipClass] | None = None


GALLIUM_ROUTES: tuple[GalliumRoute, ...] = (
    GalliumRoute(
        "r300g",
        lambda s, chipset: s.vendor == R300G_VENDOR,
        DriverKind.R300G,
        classify_radeon,
    ),
    GalliumRoute(
        "r600g",
        lambda s, chipset: (
            s.vendor == R600G_VENDOR and any(marker in s.renderer for marker in R600G_MARKERS)
        ),
        DriverKind.R600G,
        classify_radeon,
    ),
    GalliumRoute(
        "nouveau",
        lambda s, chipset: s.vendor == NOUVEAU_VENDOR,
        DriverKind.NOUVEAU,
        classify_nvidia,
    ),
    GalliumRoute(
        "softpipe",
        lambda s, chipset: s.vendor == VMWARE_VENDOR and chipset == "softpipe",
        DriverKind.SOFTPIPE,
    ),
    GalliumRoute(
        "llvmpipe",
        lambda s, chipset: s.vendor == VMWARE_VENDOR and chipset == "llvmpipe",
        DriverKind.LLVMPIPE,
    ),
    GalliumRoute(
        "svga3d",
        lambda s, chipset: s.vendor == VMWARE_VENDOR and "SVGA3D" in chipset,
        DriverKind.VMWARE,
    ),
)


def gallium_chipset(renderer: str) -> tuple[str, VersionNumber]:
    """Split a Mesa renderer string into (chipset, Gallium version).

    ``"Gallium 0.4 on AMD RV740"`` gives ``("RV740", 0.4)``; renderers
    without the ``Gallium`` marker report their chipset as the first token.
    """
    tokens = renderer.split(" ")
    if "Gallium" not in renderer:
        return token_at(tokens, 0), GALLIUM_BASELINE
    gallium_version = VersionNumber.parse(token_at(tokens, 1))
    if token_at(tokens, 3) in ("AMD", "ATI"):
        return token_at(tokens, 4), gallium_version
    return token_at(tokens, 3), gallium_version


def _identify_gallium(s: DriverStrings) -> DriverIdentity:
    chipset, gallium_version = gallium_chipset(s.renderer)
    for route in GALLIUM_ROUTES:
        if route.matches(s, chipset):
            log.debug("gallium route %s matched chipset %r", route.name, chipset)
            chip_class = route.classify(chipset) if route.classify else ChipClass.UNKNOWN
            return DriverIdentity(
                driver=route.driver,
                chip_class=chip_class,
                chipset=chipset,
                gallium_version=gallium_version,
            )
    return DriverIdentity(chipset=chipset, gallium_version=gallium_version)


DRIVER_RULES: tuple[DriverRule, ...] = (
    DriverRule(
        "mesa-classic-radeon",
        lambda s: s.renderer.startswith("Mesa DRI R"),
        _identify_classic_radeon,
    ),
    DriverRule("intel", lambda s: "Intel" in s.renderer, _identify_intel),
    DriverRule("catalyst", lambda s: s.vendor == CATALYST_VENDOR, _identify_catalyst),
    DriverRule("nvidia", lambda s: s.vendor == NVIDIA_VENDOR, _identify_nvidia),
    DriverRule("qualcomm", lambda s: s.vendor == QUALCOMM_VENDOR, _identify_qualcomm),
    DriverRule("swrast", lambda s: s.renderer == SWRAST_RENDERER, _identify_swrast),
    DriverRule(
        "virtualbox",
        lambda s: s.vendor == VIRTUALBOX_VENDOR and s.renderer == VIRTUALBOX_RENDERER,
        _identify_virtualbox,
    ),
    DriverRule("gallium", lambda s: True, _identify_gallium),
)


def identify_driver(vendor: str, renderer: str, version: str) -> DriverIdentity:
    """Run :data:`DRIVER_RULES` in priority order and return the first identity."""
    strings = DriverStrings(vendor, renderer, version)
    for rule in DRIVER_RULES:
        if rule.matches(strings):
            identity = rule.identify(strings)
            log.debug(
                "driver rule %s matched: driver=%s chip_class=%s",
                rule.name,
                identity.driver.name,
                identity.chip_class.name,
            )
            return identity
    return DriverIdentity()
