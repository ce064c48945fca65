"""Client configuration using Pydantic Settings."""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monnify_gateway.domain.entities import Credentials
from monnify_gateway.domain.exceptions import ConfigurationError


class Environment(str, Enum):
    """Gateway environment the client talks to."""

    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Monnify client settings loaded from environment variables.

    All settings can be overridden via MONNIFY_-prefixed environment
    variables or a .env file. Instances can also be built explicitly so
    that several independently configured clients coexist:

        sandbox = Settings(api_key="MK_TEST_...", client_secret="...")
        live = Settings(environment="production", api_key="MK_PROD_...", ...)
    """

    model_config = SettingsConfigDict(
        env_prefix="MONNIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Environment.TEST

    # Credentials
    api_key: str = ""
    client_secret: str = ""
    contract_code: str = ""
    wallet_id: str = ""

    # Gateway
    test_base_url: str = "https://sandbox.monnify.com"
    production_base_url: str = "https://api.monnify.com"
    base_url: str | None = Field(
        default=None,
        description="Overrides the per-environment base URL when set",
    )
    api_prefix: str = "api/v1"
    timeout: float = Field(default=30.0, gt=0)
    currency_code: str = "NGN"

    # Bearer token policy
    token_cache_enabled: bool = True
    token_expiry_leeway: float = Field(
        default=30.0,
        ge=0,
        description="Seconds before declared expiry at which a cached token is dropped",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("test_base_url", "production_base_url", "base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return value.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def resolved_base_url(self) -> str:
        """Base URL for the configured environment."""
        if self.base_url:
            return self.base_url
        if self.is_production:
            return self.production_base_url
        return self.test_base_url

    @property
    def api_base_url(self) -> str:
        return f"{self.resolved_base_url}/{self.api_prefix.strip('/')}"

    def credentials(self) -> Credentials:
        """
        Build the immutable credential set.

        Raises:
            ConfigurationError: If the API key or client secret is missing
        """
        missing = [
            name
            for name, value in (
                ("api_key", self.api_key),
                ("client_secret", self.client_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing Monnify credentials: {', '.join(missing)}"
            )

        return Credentials(
            api_key=self.api_key,
            client_secret=self.client_secret,
            contract_code=self.contract_code,
            wallet_id=self.wallet_id,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
