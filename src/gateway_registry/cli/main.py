"""gateway-registry CLI entry point: Click group with subcommands."""

import click

from gateway_registry import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gateway-registry")
def cli() -> None:
    """Gateway registry - model capabilities and provider quota checks."""


# Import and register subcommands
from gateway_registry.cli.models import channels, lookup, models  # noqa: E402
from gateway_registry.cli.quota import quota  # noqa: E402

cli.add_command(channels)
cli.add_command(models)
cli.add_command(lookup)
cli.add_command(quota)
