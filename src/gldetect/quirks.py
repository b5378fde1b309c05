"""Capability and quirk flags derived from the identified driver and GPU.

Rules run in a fixed order and later rules may override earlier ones. In
particular the OpenGL ES override runs last: an ES context could not have
been created without shader support, whatever the generation rules say.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from gldetect.chipclass import ChipClass, is_intel, is_nvidia, is_radeon
from gldetect.driver import (
    NON_JIT_SOFTWARE_DRIVERS,
    SOFTWARE_DRIVERS,
    VIRTUAL_MACHINE_DRIVERS,
    DriverKind,
)

GLSL_EXTENSIONS = frozenset(
    {"GL_ARB_shader_objects", "GL_ARB_fragment_shader", "GL_ARB_vertex_shader"}
)
NPOT_EXTENSION = "GL_ARB_texture_non_power_of_two"


@dataclass(frozen=True)
class Quirks:
    loose_binding: bool = False
    supports_glsl: bool = False
    limited_glsl: bool = False
    texture_npot: bool = False
    limited_npot: bool = False
    virtual_machine: bool = False
    prefer_buffer_sub_data: bool = False


def baseline_quirks(extensions: frozenset[str], *, gles: bool) -> Quirks:
    """Shader and NPOT support as advertised by the extension list."""
    if gles:
        return Quirks(supports_glsl=True, texture_npot=True)
    return Quirks(
        supports_glsl=GLSL_EXTENSIONS <= extensions,
        texture_npot=NPOT_EXTENSION in extensions,
    )


def _radeon(q: Quirks, driver: DriverKind, chip_class: ChipClass, renderer: str) -> Quirks:
    # R200 is programmable, but SM 1.4 is of no practical use
    supports_glsl = q.supports_glsl and chip_class >= ChipClass.R300
    texture_npot = q.texture_npot
    limited_glsl = False
    limited_npot = False

    if chip_class < ChipClass.R600:
        if driver == DriverKind.CATALYST:
            # software fallback
            texture_npot = limited_npot = False
        elif driver == DriverKind.R300G:
            limited_npot = texture_npot
        limited_glsl = supports_glsl

    loose_binding = q.loose_binding
    if driver == DriverKind.R600G or (driver == DriverKind.R600C and "DRI2" in renderer):
        loose_binding = True

    return replace(
        q,
        supports_glsl=supports_glsl,
        limited_glsl=limited_glsl,
        texture_npot=texture_npot,
        limited_npot=limited_npot,
        loose_binding=loose_binding,
    )


def _nvidia(q: Quirks, driver: DriverKind, chip_class: ChipClass) -> Quirks:
    supports_glsl = q.supports_glsl
    loose_binding = q.loose_binding
    prefer_buffer_sub_data = q.prefer_buffer_sub_data
    if driver == DriverKind.NVIDIA:
        if chip_class < ChipClass.NV40:
            # high likelihood of software emulation
            supports_glsl = False
        loose_binding = True
        prefer_buffer_sub_data = True

    return replace(
        q,
        supports_glsl=supports_glsl,
        loose_binding=loose_binding,
        prefer_buffer_sub_data=prefer_buffer_sub_data,
        limited_npot=q.texture_npot and chip_class < ChipClass.NV40,
        limited_glsl=supports_glsl and chip_class < ChipClass.G80,
    )


def _intel(q: Quirks, chip_class: ChipClass) -> Quirks:
    supports_glsl = q.supports_glsl and chip_class >= ChipClass.I915
    # https://bugs.freedesktop.org/show_bug.cgi?id=80349#c1
    return replace(
        q,
        supports_glsl=supports_glsl,
        limited_glsl=supports_glsl and chip_class < ChipClass.I965,
        loose_binding=False,
    )


def _software(q: Quirks, driver: DriverKind) -> Quirks:
    if driver in NON_JIT_SOFTWARE_DRIVERS:
        return replace(q, supports_glsl=False, limited_glsl=False)
    return replace(q, supports_glsl=True, limited_glsl=False)


def resolve_quirks(
    driver: DriverKind,
    chip_class: ChipClass,
    *,
    extensions: frozenset[str] = frozenset(),
    gles: bool = False,
    renderer: str = "",
    baseline: Quirks | None = None,
) -> Quirks:
    """Combine driver and GPU generation into the final flag set.

    *baseline* overrides the extension-derived starting point; otherwise it
    is computed from *extensions* and *gles*.
    """
    q = baseline if baseline is not None else baseline_quirks(extensions, gles=gles)

    if is_radeon(chip_class):
        q = _radeon(q, driver, chip_class, renderer)

    if is_nvidia(chip_class):
        q = _nvidia(q, driver, chip_class)

    if is_intel(chip_class):
        q = _intel(q, chip_class)

    if driver in SOFTWARE_DRIVERS:
        q = _software(q, driver)

    if chip_class == ChipClass.UNKNOWN and driver == DriverKind.UNKNOWN:
        # unknown hardware: be optimistic and assume a GLSL capable GPU
        q = replace(q, supports_glsl=True)

    if driver in VIRTUAL_MACHINE_DRIVERS:
        q = replace(q, virtual_machine=True)

    if gles:
        q = replace(q, supports_glsl=True, limited_glsl=False)

    return q
