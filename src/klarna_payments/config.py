"""Configuration surface for the Klarna Payments SDK."""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "klarna-payments-sdk-python/0.1.0"


class Environment(str, Enum):
    PLAYGROUND = "playground"
    PRODUCTION = "production"


class Region(str, Enum):
    EU = "eu"
    NA = "na"
    OC = "oc"


_REGION_HOSTS = {
    Region.EU: "api",
    Region.NA: "api-na",
    Region.OC: "api-oc",
}


def base_url_for(environment: Environment, region: Region) -> str:
    """Return the API base URL for an environment and region."""
    host = _REGION_HOSTS[Region(region)]
    if Environment(environment) is Environment.PLAYGROUND:
        return f"https://{host}.playground.klarna.com"
    return f"https://{host}.klarna.com"


PLAYGROUND_BASE_URL = base_url_for(Environment.PLAYGROUND, Region.EU)


class KlarnaConfig(BaseSettings):
    """Client configuration.

    Values passed to the constructor win; anything left out is read from
    ``KLARNA_*`` environment variables and then falls back to the defaults
    below. Credentials have no default: an empty username or password makes
    every authenticated call fail with ``MissingCredentialsError``.
    """

    model_config = SettingsConfigDict(
        env_prefix="KLARNA_",
        extra="ignore",
        frozen=True,
    )

    username: str = ""
    password: SecretStr = SecretStr("")
    environment: Environment = Environment.PLAYGROUND
    region: Region = Region.EU
    base_url: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    timeout: Optional[float] = None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @property
    def api_base_url(self) -> str:
        """The explicit ``base_url``, or the one for ``environment``/``region``."""
        return self.base_url or base_url_for(self.environment, self.region)

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and bool(self.password.get_secret_value())

    @classmethod
    def from_env(cls, env_file: Union[str, None] = ".env") -> "KlarnaConfig":
        """Load configuration from the environment and an optional dotenv file."""
        return cls(_env_file=env_file)
