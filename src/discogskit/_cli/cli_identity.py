import asyncio

import click

from .._discogs import Discogs
from .._utils.constants import SDK_NAME, SDK_VERSION
from ..models.errors import DiscogsError
from ..models.oauth import Identity


async def _identity(verbose: bool) -> Identity:
    async with Discogs(SDK_NAME, SDK_VERSION, debug=verbose) as discogs:
        return await discogs.oauth.identity()


@click.command()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def identity(verbose=False):
    """Show which Discogs account the configured credentials belong to."""
    try:
        result = asyncio.run(_identity(verbose))
    except DiscogsError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"{result.username} (id {result.id})")
