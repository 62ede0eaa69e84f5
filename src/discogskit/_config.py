from typing import Optional

from pydantic import BaseModel

from ._utils.constants import DEFAULT_ABOUT_URL, DEFAULT_DOMAIN


class Config(BaseModel):
    """Identity of the embedding application and connection settings.

    Discogs requires every request to carry a User-Agent naming the
    application, its version and a URL describing it.
    """

    app_name: str
    app_version: str
    about_url: str = DEFAULT_ABOUT_URL
    domain: str = DEFAULT_DOMAIN
    timeout: Optional[float] = None
    max_retries: int = 3

    @property
    def api_base_url(self) -> str:
        return f"https://api.{self.domain}"

    @property
    def www_base_url(self) -> str:
        return f"https://www.{self.domain}"

    @property
    def user_agent(self) -> str:
        return f"{self.app_name}/{self.app_version} +{self.about_url}"
