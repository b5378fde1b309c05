"""Command: gldetect classify."""

from __future__ import annotations

import click

from gldetect.chipclass import chip_class_to_string
from gldetect.classifiers import VENDOR_CLASSIFIERS
from gldetect.formatters.json_fmt import write_json


@click.command("classify")
@click.argument("family", type=click.Choice(sorted(VENDOR_CLASSIFIERS), case_sensitive=False))
@click.argument("text")
@click.option("--json", "use_json", is_flag=True, help="JSON output")
def classify_cmd(family: str, text: str, use_json: bool) -> None:
    """Map a chipset or renderer TEXT to a GPU class of one vendor FAMILY."""
    chip_class = VENDOR_CLASSIFIERS[family.lower()](text)
    if use_json:
        write_json(
            {
                "family": family.lower(),
                "text": text,
                "chip_class": chip_class_to_string(chip_class),
                "id": chip_class.name,
            }
        )
        return
    click.echo(chip_class_to_string(chip_class))
