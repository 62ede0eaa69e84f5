import asyncio
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class OAuthState(IntEnum):
    """Progress of the three-legged OAuth 1.0a flow."""

    UNAUTHENTICATED = 0
    REQUEST_TOKEN_ISSUED = 1
    USER_AUTHORIZED = 2
    AUTHENTICATED = 3


@dataclass
class AuthContext:
    """Credentials and OAuth secrets owned by one client instance.

    Shared by reference across every request issued by the client. Writes go
    through the ``set_*`` coroutines, which hold ``lock`` so that only one
    writer at a time mutates the context.
    """

    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = field(default=None, repr=False)
    personal_token: Optional[str] = field(default=None, repr=False)
    oauth_token: Optional[str] = None
    oauth_token_secret: Optional[str] = field(default=None, repr=False)

    request_token: Optional[str] = field(default=None, repr=False)
    request_token_secret: Optional[str] = field(default=None, repr=False)
    request_token_response: Optional[str] = field(default=None, repr=False)
    verifier: Optional[str] = field(default=None, repr=False)
    state: OAuthState = OAuthState.UNAUTHENTICATED

    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.oauth_token and self.oauth_token_secret:
            self.state = OAuthState.AUTHENTICATED

    @property
    def has_consumer(self) -> bool:
        return bool(self.consumer_key and self.consumer_secret)

    @property
    def has_access_token(self) -> bool:
        return bool(self.oauth_token and self.oauth_token_secret)

    async def set_request_token(self, token: str, secret: str, raw: str) -> None:
        async with self.lock:
            self.request_token = token
            self.request_token_secret = secret
            self.request_token_response = raw
            self.verifier = None
            self.state = OAuthState.REQUEST_TOKEN_ISSUED

    async def set_verifier(self, verifier: str) -> None:
        async with self.lock:
            self.verifier = verifier
            self.state = OAuthState.USER_AUTHORIZED

    async def set_access_token(self, token: str, secret: str) -> None:
        async with self.lock:
            self.oauth_token = token
            self.oauth_token_secret = secret
            self.state = OAuthState.AUTHENTICATED

    async def reset(self) -> None:
        """Forget every OAuth-derived secret and restart the flow."""
        async with self.lock:
            self.oauth_token = None
            self.oauth_token_secret = None
            self.request_token = None
            self.request_token_secret = None
            self.request_token_response = None
            self.verifier = None
            self.state = OAuthState.UNAUTHENTICATED
