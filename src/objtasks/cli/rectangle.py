"""CLI command: objtasks rectangle -- compute a rectangle's area."""

from __future__ import annotations

import sys

import click

from objtasks.config import ObjtasksConfig
from objtasks.errors import InvalidDimensionError
from objtasks.serialization import to_json
from objtasks.shapes import rectangle as make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rectangle(config: ObjtasksConfig | None, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    config = config or ObjtasksConfig()
    try:
        rect = make_rectangle(width, height)
    except InvalidDimensionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = {"width": rect.width, "height": rect.height, "area": rect.area}
        click.echo(
            to_json(payload, indent=config.json_indent, sort_keys=config.json_sort_keys)
        )
    else:
        click.echo(f"{rect.area:.15g}")
