from __future__ import annotations

import logging

import click

from gldetect import __version__
from gldetect.commands.classify import classify_cmd
from gldetect.commands.report import kernel_cmd, report_cmd


def _configure_logging(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Send debug logging (rule matches, detection summary) to stderr."""
    if not value:
        return
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="gldetect")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_configure_logging,
    help="Log classification decisions to stderr.",
)
def main() -> None:
    """gldetect: classify OpenGL driver strings into GPU classes and quirks."""


main.add_command(report_cmd, name="report")
main.add_command(classify_cmd, name="classify")
main.add_command(kernel_cmd, name="kernel")


if __name__ == "__main__":
    main()
