"""Commands: gldetect report, gldetect kernel."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import click

from gldetect import _platform
from gldetect.formatters.json_fmt import write_json
from gldetect.formatters.kv import write_kv
from gldetect.platform import GLString, detect, static_query
from gldetect.report import format_report
from gldetect.version import VersionNumber

INPUT_ENV = "GLDETECT_INPUT"
SERVER_VERSION_ENV = "GLDETECT_SERVER_VERSION"


def load_strings(path: Path) -> dict[str, str]:
    """Read captured GL strings from a JSON object file.

    ``extensions`` may be a space separated string or a list of names.
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        click.echo(f"error: cannot read {path}: {exc.strerror or exc}", err=True)
        raise SystemExit(1) from exc
    except UnicodeDecodeError as exc:
        click.echo(f"error: {path} is not valid JSON: {exc.reason} at byte {exc.start}", err=True)
        raise SystemExit(1) from exc
    except json.JSONDecodeError as exc:
        click.echo(f"error: {path} is not valid JSON: {exc.msg}", err=True)
        raise SystemExit(1) from exc
    if not isinstance(data, dict):
        click.echo(f"error: {path} must contain a JSON object", err=True)
        raise SystemExit(1)

    strings: dict[str, str] = {}
    for name in GLString:
        value = data.get(name.value)
        if value is None:
            continue
        if isinstance(value, list):
            value = " ".join(str(v) for v in value)
        strings[name.value] = str(value)
    return strings


@click.command("report")
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"JSON file with captured GL strings (default: ${INPUT_ENV}).",
)
@click.option("--vendor", default=None, help="GL_VENDOR string.")
@click.option("--renderer", default=None, help="GL_RENDERER string.")
@click.option("--gl-version", default=None, help="GL_VERSION string.")
@click.option("--extensions", default=None, help="Space separated GL_EXTENSIONS.")
@click.option("--glsl-version", default=None, help="GL_SHADING_LANGUAGE_VERSION string.")
@click.option(
    "--server-version",
    default=None,
    help=f"Windowing server version (default: ${SERVER_VERSION_ENV}).",
)
@click.option("--kernel-release", default=None, help="Kernel release to report instead of uname.")
@click.option("--json", "use_json", is_flag=True, help="JSON output")
def report_cmd(
    input_path: Path | None,
    vendor: str | None,
    renderer: str | None,
    gl_version: str | None,
    extensions: str | None,
    glsl_version: str | None,
    server_version: str | None,
    kernel_release: str | None,
    use_json: bool,
) -> None:
    """Classify captured GL strings and print the platform report."""
    if input_path is None and os.environ.get(INPUT_ENV):
        input_path = Path(os.environ[INPUT_ENV])
    strings = load_strings(input_path) if input_path is not None else {}

    overrides = {
        GLString.VENDOR: vendor,
        GLString.RENDERER: renderer,
        GLString.VERSION: gl_version,
        GLString.EXTENSIONS: extensions,
        GLString.SHADING_LANGUAGE_VERSION: glsl_version,
    }
    for name, value in overrides.items():
        if value is not None:
            strings[name.value] = value

    if not strings.get(GLString.VENDOR.value) and not strings.get(GLString.RENDERER.value):
        click.echo("error: no GL strings given; use --input or --vendor/--renderer", err=True)
        raise SystemExit(1)

    server_text = server_version or os.environ.get(SERVER_VERSION_ENV)
    kernel = VersionNumber.parse(kernel_release) if kernel_release is not None else None

    snapshot = detect(
        static_query(strings),
        server_version=VersionNumber.parse(server_text) if server_text else None,
        kernel_version=kernel,
    )
    if use_json:
        write_json(snapshot.to_dict())
        return
    click.echo(format_report(snapshot))


@click.command("kernel")
@click.option("--json", "use_json", is_flag=True, help="JSON output")
def kernel_cmd(use_json: bool) -> None:
    """Show the running kernel release and its parsed version."""
    result = {
        "release": _platform.kernel_release(),
        "version": str(_platform.kernel_version()),
    }
    if use_json:
        write_json(result)
        return
    write_kv(result)
