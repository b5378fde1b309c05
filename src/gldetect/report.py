"""Human-readable diagnostic report of a platform snapshot."""

from __future__ import annotations

from gldetect.chipclass import chip_class_to_string
from gldetect.driver import driver_to_string
from gldetect.formatters.kv import format_kv
from gldetect.platform import PlatformSnapshot

# Labels are padded to this many columns, the layout tools parse.
LABEL_WIDTH = 40


def yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def support_level(supported: bool, limited: bool) -> str:
    if not supported:
        return "no"
    return "limited" if limited else "yes"


def report_lines(p: PlatformSnapshot) -> list[tuple[str, str]]:
    """Return the ordered (label, value) pairs of the diagnostic report."""
    lines: list[tuple[str, str]] = [
        ("OpenGL vendor string", p.vendor),
        ("OpenGL renderer string", p.renderer),
        ("OpenGL version string", p.version),
    ]
    if p.supports_glsl:
        lines.append(("OpenGL shading language version string", p.glsl_version_string))

    lines.append(("Driver", driver_to_string(p.driver)))
    if not p.is_mesa_driver:
        lines.append(("Driver version", str(p.driver_version)))

    lines.append(("GPU class", chip_class_to_string(p.chip_class)))
    lines.append(("OpenGL version", str(p.gl_version)))

    if p.supports_glsl:
        lines.append(("GLSL version", str(p.glsl_version)))
    if p.is_mesa_driver:
        lines.append(("Mesa version", str(p.mesa_version)))
    if p.server_version:
        lines.append(("X server version", str(p.server_version)))
    if p.kernel_version:
        lines.append(("Linux kernel version", str(p.kernel_version)))

    lines += [
        ("Requires strict binding", yes_no(p.requires_strict_binding)),
        ("GLSL shaders", support_level(p.supports_glsl, p.limited_glsl)),
        ("Texture NPOT support", support_level(p.texture_npot, p.limited_npot)),
        ("Virtual Machine", yes_no(p.virtual_machine)),
    ]
    return lines


def format_report(snapshot: PlatformSnapshot) -> str:
    # empty strings are printed as-is
    return format_kv(dict(report_lines(snapshot)), width=LABEL_WIDTH, empty="")
