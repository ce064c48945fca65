"""
Unit Tests for client settings.

These tests verify:
1. Environment selection of the base URL
2. Credential construction and validation
3. Environment variable loading with the MONNIFY_ prefix
"""

import pytest

from monnify_gateway.core.config import Environment, Settings
from monnify_gateway.domain.exceptions import ConfigurationError


def make_settings(**values) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, **values)


class TestBaseUrl:
    """Tests for base URL resolution."""

    def test_test_environment_uses_sandbox(self):
        settings = make_settings()
        assert settings.environment == Environment.TEST
        assert settings.resolved_base_url == "https://sandbox.monnify.com"
        assert settings.api_base_url == "https://sandbox.monnify.com/api/v1"

    def test_production_environment(self):
        settings = make_settings(environment="production")
        assert settings.is_production
        assert settings.resolved_base_url == "https://api.monnify.com"

    def test_override_wins_and_trailing_slash_is_stripped(self):
        settings = make_settings(environment="production", base_url="https://proxy.local/")
        assert settings.api_base_url == "https://proxy.local/api/v1"

    def test_independent_instances_coexist(self):
        sandbox = make_settings(api_key="MK_TEST_A", client_secret="a")
        live = make_settings(environment="production", api_key="MK_PROD_B", client_secret="b")
        assert sandbox.credentials().api_key == "MK_TEST_A"
        assert live.credentials().api_key == "MK_PROD_B"
        assert sandbox.resolved_base_url != live.resolved_base_url


class TestCredentials:
    """Tests for credential construction."""

    def test_credentials_from_settings(self):
        settings = make_settings(
            api_key="MK_TEST_KEY",
            client_secret="SECRET123",
            contract_code="C1",
            wallet_id="W1",
        )
        credentials = settings.credentials()
        assert credentials.api_key == "MK_TEST_KEY"
        assert credentials.client_secret == "SECRET123"
        assert credentials.contract_code == "C1"
        assert credentials.wallet_id == "W1"

    def test_missing_secret_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            make_settings(api_key="MK_TEST_KEY").credentials()
        assert "client_secret" in exc_info.value.message
        assert exc_info.value.code == "CONFIGURATION_ERROR"


class TestEnvironmentLoading:
    """Tests for MONNIFY_-prefixed environment variables."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("MONNIFY_API_KEY", "MK_ENV")
        monkeypatch.setenv("MONNIFY_CLIENT_SECRET", "ENV_SECRET")
        monkeypatch.setenv("MONNIFY_TOKEN_CACHE_ENABLED", "false")
        monkeypatch.setenv("MONNIFY_TIMEOUT", "12.5")

        settings = make_settings()

        assert settings.api_key == "MK_ENV"
        assert settings.client_secret == "ENV_SECRET"
        assert settings.token_cache_enabled is False
        assert settings.timeout == 12.5

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            make_settings(timeout=0)
