"""Shared helpers for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

from gldetect.platform import GLString, PlatformSnapshot, StringQuery, detect, static_query
from gldetect.version import VersionNumber

GLSL_EXTENSIONS = "GL_ARB_shader_objects GL_ARB_fragment_shader GL_ARB_vertex_shader"
NPOT_EXTENSION = "GL_ARB_texture_non_power_of_two"
ALL_EXTENSIONS = f"GL_ARB_multitexture {GLSL_EXTENSIONS} {NPOT_EXTENSION}"

NVIDIA_STRINGS: dict[str, str] = {
    "vendor": "NVIDIA Corporation",
    "renderer": "GeForce GTX 480/PCIe/SSE2",
    "version": "4.5.0 NVIDIA 361.45",
    "extensions": ALL_EXTENSIONS,
    "glsl_version": "4.50 NVIDIA",
}

R600G_STRINGS: dict[str, str] = {
    "vendor": "X.Org",
    "renderer": "Gallium 0.4 on AMD RV740",
    "version": "3.0 Mesa 10.1.0",
    "extensions": ALL_EXTENSIONS,
    "glsl_version": "1.30",
}


def make_query(
    *,
    vendor: str | bytes = "",
    renderer: str | bytes = "",
    version: str | bytes = "",
    extensions: str | bytes = "",
    glsl_version: str | bytes | None = None,
) -> StringQuery:
    """Build a GL string query over literal strings."""
    return static_query(
        {
            "vendor": vendor,
            "renderer": renderer,
            "version": version,
            "extensions": extensions,
            "glsl_version": glsl_version,
        }
    )


def detect_strings(
    strings: dict[str, Any] | None = None,
    *,
    kernel_version: VersionNumber | None = None,
    server_version: VersionNumber | None = None,
    **kwargs: Any,
) -> PlatformSnapshot:
    """Run detection over literal strings with the kernel pinned to 0.0."""
    query = make_query(**{**(strings or {}), **kwargs})
    return detect(
        query,
        kernel_version=kernel_version or VersionNumber(),
        server_version=server_version,
    )


class RecordingQuery:
    """A string query that remembers which strings were requested."""

    def __init__(self, strings: dict[str, str]) -> None:
        self._query = static_query(strings)
        self.calls: list[GLString] = []

    def __call__(self, name: GLString) -> str | bytes | None:
        self.calls.append(name)
        return self._query(name)


@pytest.fixture
def nvidia_snapshot() -> PlatformSnapshot:
    return detect_strings(NVIDIA_STRINGS, kernel_version=VersionNumber(5, 15, 0))


@pytest.fixture
def r600g_snapshot() -> PlatformSnapshot:
    return detect_strings(R600G_STRINGS)
