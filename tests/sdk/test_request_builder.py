import json

import pytest

from discogskit import AuthContext, BadAuthError, BadURLError, Config, HttpMethod
from discogskit._utils._request_builder import (
    EMPTY_BODY,
    OAuthParams,
    RequestBuilder,
    encode_body,
    oauth_header,
    plaintext_signature,
)
from discogskit.endpoints import Releases
from discogskit.models import ProfileBody
from tests.utils.oauth_header import parse_oauth_header


@pytest.fixture
def builder(config: Config) -> RequestBuilder:
    return RequestBuilder(config)


class TestPlaintextSignature:
    def test_without_token_secret(self):
        assert plaintext_signature("S") == "S&"

    def test_with_token_secret(self):
        assert plaintext_signature("S", "T") == "S&T"


class TestOAuthHeader:
    def test_field_order_and_format(self):
        header = oauth_header(
            "key",
            "S",
            OAuthParams(callback="myapp://cb"),
            nonce="n0nce",
            timestamp=1700000000,
        )

        assert header == (
            'OAuth oauth_consumer_key="key",oauth_nonce="n0nce",'
            'oauth_signature_method="PLAINTEXT",oauth_timestamp="1700000000",'
            'oauth_version="1.0",oauth_callback="myapp://cb",oauth_signature="S&"'
        )

    def test_token_and_verifier(self):
        fields = parse_oauth_header(
            oauth_header(
                "key", "S", OAuthParams(token="tok", verifier="v", token_secret="T")
            )
        )

        assert fields["oauth_token"] == "tok"
        assert fields["oauth_verifier"] == "v"
        assert fields["oauth_signature"] == "S&T"
        assert "oauth_callback" not in fields

    def test_fresh_nonce_per_header(self):
        first = parse_oauth_header(oauth_header("key", "S", OAuthParams()))
        second = parse_oauth_header(oauth_header("key", "S", OAuthParams()))

        assert first["oauth_nonce"] != second["oauth_nonce"]
        assert first["oauth_timestamp"].isdigit()


class TestEncodeBody:
    def test_model_drops_none_fields(self):
        assert json.loads(encode_body(ProfileBody(username="me", name=None))) == {
            "username": "me"
        }

    def test_plain_dict(self):
        assert encode_body(EMPTY_BODY) == b"{}"


class TestAuthorization:
    def test_personal_token(self, builder: RequestBuilder, token_auth: AuthContext):
        assert builder.authorization(token_auth) == "Discogs token=abc"

    def test_consumer_pair(self, builder: RequestBuilder, consumer_auth: AuthContext):
        assert (
            builder.authorization(consumer_auth)
            == "Discogs key=consumer-key, secret=S"
        )

    def test_personal_token_wins_over_consumer_pair(self, builder: RequestBuilder):
        auth = AuthContext(
            consumer_key="consumer-key", consumer_secret="S", personal_token="abc"
        )

        assert builder.authorization(auth) == "Discogs token=abc"

    def test_access_token_pair_signs_requests(self, builder: RequestBuilder):
        auth = AuthContext(
            consumer_key="consumer-key",
            consumer_secret="S",
            oauth_token="tok",
            oauth_token_secret="T",
        )

        fields = parse_oauth_header(builder.authorization(auth))

        assert fields["oauth_consumer_key"] == "consumer-key"
        assert fields["oauth_token"] == "tok"
        assert fields["oauth_signature"] == "S&T"

    def test_oauth_step_requires_consumer_pair(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        with pytest.raises(BadAuthError):
            builder.authorization(token_auth, OAuthParams(callback="oob"))

    def test_no_credentials(self, builder: RequestBuilder):
        with pytest.raises(BadAuthError):
            builder.authorization(AuthContext())


class TestBuild:
    def test_get_with_personal_token(
        self, builder: RequestBuilder, token_auth: AuthContext, user_agent: str
    ):
        request = builder.build("/releases/123", HttpMethod.GET, token_auth)

        assert request.method == HttpMethod.GET
        assert str(request.url) == "https://api.discogs.com/releases/123"
        assert request.headers["Authorization"] == "Discogs token=abc"
        assert request.headers["User-Agent"] == user_agent
        assert "Content-Type" not in request.headers
        assert request.content is None

    def test_user_agent_format(self, builder: RequestBuilder, token_auth: AuthContext):
        request = builder.build("/releases/1", HttpMethod.GET, token_auth)

        assert (
            request.headers["User-Agent"]
            == "DiscogsKitTests/1.0.0 +https://github.com/lumaa-dev/DiscogsKit"
        )

    def test_queries_without_value_are_omitted(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        request = builder.build(
            "/artists/1/releases",
            HttpMethod.GET,
            token_auth,
            [("page", "2"), ("per_page", None)],
        )

        assert request.url.params.get("page") == "2"
        assert "per_page" not in request.url.params
        assert request.url.query == b"page=2"

    def test_delete_never_has_body(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        request = builder.build(
            "/releases/1/rating/me", HttpMethod.DELETE, token_auth, body={"x": 1}
        )

        assert request.content is None
        assert "Content-Type" not in request.headers

    def test_put_rating_is_clamped(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        ep = Releases.set_rating(123, "me", 7)

        request = builder.build(ep.path, HttpMethod.PUT, token_auth, body=ep.body)

        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content or b"") == {"rating": 5}

    def test_post_without_body_sends_empty_object(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        request = builder.build("/users/me/collection/folders", HttpMethod.POST, token_auth)

        assert request.content == b"{}"
        assert request.headers["Content-Type"] == "application/json"

    def test_oauth_step_is_form_encoded(
        self, builder: RequestBuilder, consumer_auth: AuthContext
    ):
        request = builder.build(
            "/oauth/request_token",
            HttpMethod.POST,
            consumer_auth,
            oauth=OAuthParams(callback="oob"),
        )

        assert request.content == b""
        assert (
            request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        )
        fields = parse_oauth_header(request.headers["Authorization"])
        assert fields["oauth_callback"] == "oob"
        assert fields["oauth_signature"] == "S&"

    def test_base_url_override(self, builder: RequestBuilder, token_auth: AuthContext):
        request = builder.build(
            "/oauth/authorize",
            HttpMethod.GET,
            token_auth,
            base_url="https://www.discogs.com",
        )

        assert request.url.host == "www.discogs.com"

    def test_relative_path_is_rejected(
        self, builder: RequestBuilder, token_auth: AuthContext
    ):
        with pytest.raises(BadURLError):
            builder.build("releases/1", HttpMethod.GET, token_auth)

    def test_builder_does_not_mutate_auth(
        self, builder: RequestBuilder, consumer_auth: AuthContext
    ):
        before = (consumer_auth.state, consumer_auth.oauth_token)

        builder.build(
            "/oauth/request_token",
            HttpMethod.POST,
            consumer_auth,
            oauth=OAuthParams(callback="oob"),
        )

        assert (consumer_auth.state, consumer_auth.oauth_token) == before
