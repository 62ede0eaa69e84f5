from unittest.mock import patch

import pytest
from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from discogskit._cli import cli
from discogskit._utils.constants import SDK_VERSION
from tests.utils.oauth_header import parse_oauth_header


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestAuth:
    def test_full_flow(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/request_token",
            method="POST",
            text="oauth_token=req-tok&oauth_token_secret=req-secret",
        )
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/access_token",
            method="POST",
            text="oauth_token=acc-tok&oauth_token_secret=acc-secret",
        )

        with patch("discogskit._cli.cli_auth.webbrowser.open") as mock_open:
            result = runner.invoke(
                cli,
                ["auth", "--consumer-key", "key", "--consumer-secret", "S"],
                input="ver\n",
            )

        assert result.exit_code == 0, result.output
        authorize_url = "https://www.discogs.com/oauth/authorize?oauth_token=req-tok"
        assert authorize_url in result.output
        mock_open.assert_called_once_with(authorize_url)
        assert "DISCOGS_OAUTH_TOKEN=acc-tok" in result.output
        assert "DISCOGS_OAUTH_TOKEN_SECRET=acc-secret" in result.output

        request_token, access_token = httpx_mock.get_requests()
        assert parse_oauth_header(request_token.headers["Authorization"])[
            "oauth_callback"
        ] == "oob"
        fields = parse_oauth_header(access_token.headers["Authorization"])
        assert fields["oauth_verifier"] == "ver"
        assert fields["oauth_signature"] == "S&req-secret"

    def test_no_browser(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/request_token",
            method="POST",
            text="oauth_token=req-tok&oauth_token_secret=req-secret",
        )
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/access_token",
            method="POST",
            text="oauth_token=acc-tok&oauth_token_secret=acc-secret",
        )

        with patch("discogskit._cli.cli_auth.webbrowser.open") as mock_open:
            result = runner.invoke(
                cli,
                ["auth", "--no-browser", "--callback", "myapp://cb"],
                input="ver\n",
                env={"DISCOGS_CONSUMER_KEY": "key", "DISCOGS_CONSUMER_SECRET": "S"},
            )

        assert result.exit_code == 0, result.output
        mock_open.assert_not_called()

    def test_request_token_failure(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/request_token",
            method="POST",
            status_code=401,
            json={"message": "Invalid consumer."},
        )

        result = runner.invoke(
            cli,
            ["auth", "--consumer-key", "key", "--consumer-secret", "bad", "--no-browser"],
        )

        assert result.exit_code == 1
        assert "[Error 401] Invalid consumer." in result.output

    def test_requires_consumer_pair(self, runner: CliRunner):
        result = runner.invoke(cli, ["auth"])

        assert result.exit_code == 2
        assert "--consumer-key" in result.output


class TestIdentity:
    def test_identity(self, runner: CliRunner, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url="https://api.discogs.com/oauth/identity",
            json={"id": 42, "username": "someone"},
        )

        result = runner.invoke(cli, ["identity"], env={"DISCOGS_TOKEN": "abc"})

        assert result.exit_code == 0, result.output
        assert "someone (id 42)" in result.output
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["Authorization"] == "Discogs token=abc"

    def test_without_credentials(self, runner: CliRunner):
        result = runner.invoke(cli, ["identity"])

        assert result.exit_code == 1
        assert "No credentials available" in result.output


class TestVersion:
    def test_version(self, runner: CliRunner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert SDK_VERSION in result.output
