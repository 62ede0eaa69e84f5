import asyncio

import pytest

from discogskit import AuthContext, OAuthState


class TestAuthContext:
    def test_access_token_pair_starts_authenticated(self):
        auth = AuthContext(
            consumer_key="key",
            consumer_secret="S",
            oauth_token="tok",
            oauth_token_secret="T",
        )

        assert auth.state == OAuthState.AUTHENTICATED
        assert auth.has_access_token

    def test_secrets_are_not_in_repr(self):
        auth = AuthContext(consumer_key="key", consumer_secret="S", personal_token="abc")

        assert "consumer_secret" not in repr(auth)
        assert "abc" not in repr(auth)

    @pytest.mark.asyncio
    async def test_writes_wait_for_the_lock(self, consumer_auth: AuthContext):
        await consumer_auth.lock.acquire()
        writes = asyncio.ensure_future(
            asyncio.gather(
                consumer_auth.set_request_token("req-tok", "req-secret", "raw"),
                consumer_auth.set_access_token("acc-tok", "acc-secret"),
            )
        )
        for _ in range(5):
            await asyncio.sleep(0)

        assert not writes.done()
        assert consumer_auth.request_token is None
        assert consumer_auth.oauth_token is None
        assert consumer_auth.state == OAuthState.UNAUTHENTICATED

        consumer_auth.lock.release()
        await writes

        assert consumer_auth.request_token_secret == "req-secret"
        assert consumer_auth.oauth_token == "acc-tok"
        assert consumer_auth.oauth_token_secret == "acc-secret"
        assert consumer_auth.state == OAuthState.AUTHENTICATED

    @pytest.mark.asyncio
    async def test_reset_waits_for_the_lock(self, consumer_auth: AuthContext):
        await consumer_auth.set_access_token("acc-tok", "acc-secret")

        async with consumer_auth.lock:
            reset = asyncio.ensure_future(consumer_auth.reset())
            await asyncio.sleep(0)

            assert consumer_auth.oauth_token == "acc-tok"

        await reset

        assert consumer_auth.oauth_token is None
        assert consumer_auth.state == OAuthState.UNAUTHENTICATED
        assert consumer_auth.consumer_key == "consumer-key"
