"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    default=ObjtasksConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort JSON keys")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None, sort_keys: bool) -> None:
    """objtasks - rectangles, JSON helpers and a CSS selector builder."""
    config = ObjtasksConfig(
        log_level=log_level.upper(), json_indent=indent, json_sort_keys=sort_keys
    )
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.rectangle import rectangle  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(rectangle)
cli.add_command(selector)
