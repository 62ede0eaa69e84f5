import asyncio
import logging
import webbrowser

import click

from .._discogs import Discogs
from .._utils.constants import (
    ENV_CONSUMER_KEY,
    ENV_CONSUMER_SECRET,
    ENV_OAUTH_TOKEN,
    ENV_OAUTH_TOKEN_SECRET,
    SDK_NAME,
    SDK_VERSION,
)
from ..models.errors import DiscogsError

logger = logging.getLogger(__name__)


async def _authorize(
    consumer_key: str,
    consumer_secret: str,
    callback: str,
    open_browser: bool,
    verbose: bool,
) -> tuple[str, str]:
    async with Discogs(
        SDK_NAME,
        SDK_VERSION,
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        debug=verbose,
    ) as discogs:
        url = await discogs.oauth.authorize(callback)
        logger.debug(f"Authorize URL: {url}")

        click.echo(f"Open this URL to authorize the application:\n\n  {url}\n")
        if open_browser:
            webbrowser.open(str(url))

        verifier = click.prompt("Verification code").strip()
        await discogs.oauth.access_token(verifier=verifier)

        return discogs.auth.oauth_token, discogs.auth.oauth_token_secret  # type: ignore[return-value]


@click.command()
@click.option(
    "--consumer-key",
    envvar=ENV_CONSUMER_KEY,
    required=True,
    help="Consumer key of the registered application.",
)
@click.option(
    "--consumer-secret",
    envvar=ENV_CONSUMER_SECRET,
    required=True,
    help="Consumer secret of the registered application.",
)
@click.option(
    "--callback",
    default="oob",
    show_default=True,
    help="Callback URL registered for the application.",
)
@click.option(
    "--no-browser",
    is_flag=True,
    help="Print the authorization URL without opening a browser.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def auth(consumer_key, consumer_secret, callback, no_browser, verbose):
    """Authorize the application against a Discogs account (OAuth 1.0a).

    The resulting access token pair is printed, not stored.
    """
    try:
        token, secret = asyncio.run(
            _authorize(
                consumer_key, consumer_secret, callback, not no_browser, verbose
            )
        )
    except DiscogsError as e:
        raise click.ClickException(e.message) from e

    click.echo("Authorized. Export these to reuse the access token:")
    click.echo(f"{ENV_OAUTH_TOKEN}={token}")
    click.echo(f"{ENV_OAUTH_TOKEN_SECRET}={secret}")
