import click

from .._utils.constants import SDK_VERSION
from .cli_auth import auth
from .cli_identity import identity


@click.group()
@click.version_option(SDK_VERSION, prog_name="discogskit")
def cli() -> None:
    """Command line helpers for the Discogs API client."""


cli.add_command(auth)
cli.add_command(identity)

__all__ = ["cli"]
