"""Platform snapshot: one detection pass over the GL identification strings."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from gldetect import _platform
from gldetect.chipclass import (
    ChipClass,
    chip_class_to_string,
    is_adreno,
    is_intel,
    is_nvidia,
    is_radeon,
)
from gldetect.driver import SOFTWARE_DRIVERS, DriverKind, driver_to_string
from gldetect.identify import DEFAULT_CHIPSET, identify_driver, token_after
from gldetect.quirks import baseline_quirks, resolve_quirks
from gldetect.version import VersionNumber, _as_text

log = logging.getLogger(__name__)

GLES_PREFIX = "OpenGL ES"


class GLString(Enum):
    """Identification strings read from a live context."""

    VENDOR = "vendor"
    RENDERER = "renderer"
    VERSION = "version"
    EXTENSIONS = "extensions"
    SHADING_LANGUAGE_VERSION = "glsl_version"


class Capability(Enum):
    LOOSE_BINDING = "loose_binding"
    GLSL = "glsl"
    LIMITED_GLSL = "limited_glsl"
    TEXTURE_NPOT = "texture_npot"
    LIMITED_NPOT = "limited_npot"


# Reads one identification string from the context; None means unavailable.
StringQuery = Callable[[GLString], str | bytes | None]


def static_query(strings: Mapping[str, str | bytes | None]) -> StringQuery:
    """Build a query over pre-captured strings keyed by ``GLString`` value."""

    def _query(name: GLString) -> str | bytes | None:
        return strings.get(name.value)

    return _query


@dataclass(frozen=True)
class PlatformSnapshot:
    vendor: str = ""
    renderer: str = ""
    version: str = ""
    glsl_version_string: str = ""
    extensions: frozenset[str] = frozenset()

    gl_version: VersionNumber = field(default_factory=VersionNumber)
    glsl_version: VersionNumber = field(default_factory=VersionNumber)
    mesa_version: VersionNumber = field(default_factory=VersionNumber)
    gallium_version: VersionNumber = field(default_factory=VersionNumber)
    proprietary_driver_version: VersionNumber = field(default_factory=VersionNumber)
    server_version: VersionNumber = field(default_factory=VersionNumber)
    kernel_version: VersionNumber = field(default_factory=VersionNumber)

    driver: DriverKind = DriverKind.UNKNOWN
    chip_class: ChipClass = ChipClass.UNKNOWN
    chipset: str = DEFAULT_CHIPSET

    loose_binding: bool = False
    supports_glsl: bool = False
    limited_glsl: bool = False
    texture_npot: bool = False
    limited_npot: bool = False
    virtual_machine: bool = False
    prefer_buffer_sub_data: bool = False
    gles: bool = False

    @property
    def driver_version(self) -> VersionNumber:
        """Mesa version for Mesa drivers, the vendor driver version otherwise."""
        if self.is_mesa_driver:
            return self.mesa_version
        return self.proprietary_driver_version

    @property
    def requires_strict_binding(self) -> bool:
        return not self.loose_binding

    @property
    def is_mesa_driver(self) -> bool:
        return bool(self.mesa_version)

    @property
    def is_gallium_driver(self) -> bool:
        return bool(self.gallium_version)

    @property
    def is_radeon(self) -> bool:
        return is_radeon(self.chip_class)

    @property
    def is_nvidia(self) -> bool:
        return is_nvidia(self.chip_class)

    @property
    def is_intel(self) -> bool:
        return is_intel(self.chip_class)

    @property
    def is_adreno(self) -> bool:
        return is_adreno(self.chip_class)

    @property
    def is_virtualbox(self) -> bool:
        return self.driver == DriverKind.VIRTUALBOX

    @property
    def is_vmware(self) -> bool:
        return self.driver == DriverKind.VMWARE

    @property
    def is_software_emulation(self) -> bool:
        return self.driver in SOFTWARE_DRIVERS

    def supports(self, capability: Capability | str) -> bool:
        """Query one capability flag; unrecognized identifiers are unsupported."""
        if not isinstance(capability, Capability):
            try:
                capability = Capability(capability)
            except ValueError:
                return False
        if capability == Capability.LOOSE_BINDING:
            return self.loose_binding
        if capability == Capability.GLSL:
            return self.supports_glsl
        if capability == Capability.LIMITED_GLSL:
            return self.limited_glsl
        if capability == Capability.TEXTURE_NPOT:
            return self.texture_npot
        if capability == Capability.LIMITED_NPOT:
            return self.limited_npot
        return False

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view using the stable string forms."""
        data: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        for key, value in data.items():
            if isinstance(value, VersionNumber):
                data[key] = str(value)
        data["extensions"] = sorted(self.extensions)
        data["driver"] = driver_to_string(self.driver)
        data["chip_class"] = chip_class_to_string(self.chip_class)
        data["driver_version"] = str(self.driver_version)
        return data


def detect(
    query: StringQuery,
    *,
    server_version: VersionNumber | None = None,
    kernel_version: VersionNumber | None = None,
) -> PlatformSnapshot:
    """Run one detection pass and return the frozen snapshot.

    The shading language version is only queried when the extension list
    advertises GLSL support. *kernel_version* defaults to the running kernel.
    """
    vendor = _as_text(query(GLString.VENDOR))
    renderer = _as_text(query(GLString.RENDERER))
    version = _as_text(query(GLString.VERSION))
    extensions = frozenset(t for t in _as_text(query(GLString.EXTENSIONS)).split(" ") if t)

    gles = version.startswith(GLES_PREFIX)
    gl_version = VersionNumber.parse(version)
    mesa_version = VersionNumber.parse(token_after(version.split(" "), "Mesa"))

    baseline = baseline_quirks(extensions, gles=gles)
    glsl_version_string = ""
    if baseline.supports_glsl:
        glsl_version_string = _as_text(query(GLString.SHADING_LANGUAGE_VERSION))

    if kernel_version is None:
        kernel_version = _platform.kernel_version()

    identity = identify_driver(vendor, renderer, version)
    quirks = resolve_quirks(
        identity.driver,
        identity.chip_class,
        gles=gles,
        renderer=renderer,
        baseline=baseline,
    )

    snapshot = PlatformSnapshot(
        vendor=vendor,
        renderer=renderer,
        version=version,
        glsl_version_string=glsl_version_string,
        extensions=extensions,
        gl_version=gl_version,
        glsl_version=VersionNumber.parse(glsl_version_string),
        mesa_version=mesa_version,
        gallium_version=identity.gallium_version,
        proprietary_driver_version=identity.driver_version,
        server_version=server_version or VersionNumber(),
        kernel_version=kernel_version,
        driver=identity.driver,
        chip_class=identity.chip_class,
        chipset=identity.chipset,
        loose_binding=quirks.loose_binding,
        supports_glsl=quirks.supports_glsl,
        limited_glsl=quirks.limited_glsl,
        texture_npot=quirks.texture_npot,
        limited_npot=quirks.limited_npot,
        virtual_machine=quirks.virtual_machine,
        prefer_buffer_sub_data=quirks.prefer_buffer_sub_data,
        gles=gles,
    )
    log.debug(
        "detected %s on %s (%s), GL %s",
        driver_to_string(snapshot.driver),
        chip_class_to_string(snapshot.chip_class),
        snapshot.chipset,
        snapshot.gl_version,
    )
    return snapshot
