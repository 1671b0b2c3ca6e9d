"""Tests for FreeAgentSettings and the user .env helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from freeagent_domain.core.config import (
    PRODUCTION_API_BASE_URL,
    SANDBOX_API_BASE_URL,
    FreeAgentSettings,
    get_user_env_file,
    write_user_env_vars,
)
from freeagent_domain.core.errors import ConfigurationError


@pytest.mark.usefixtures("isolated_env")
class TestSettings:
    """Environment-driven configuration."""

    def test_defaults(self) -> None:
        """Production URL, WARNING level, no credentials."""
        settings = FreeAgentSettings()

        assert settings.api_base_url == PRODUCTION_API_BASE_URL
        assert settings.token_endpoint == f"{PRODUCTION_API_BASE_URL}/v2/token_endpoint"
        assert settings.log_level == "WARNING"
        assert settings.json_indent == 2

    def test_sandbox_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """FREEAGENT_USE_SANDBOX switches the base URL."""
        monkeypatch.setenv("FREEAGENT_USE_SANDBOX", "true")

        settings = FreeAgentSettings()

        assert settings.api_base_url == SANDBOX_API_BASE_URL
        assert settings.authorization_endpoint == f"{SANDBOX_API_BASE_URL}/v2/approve_app"

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit base URL takes priority over the sandbox flag."""
        monkeypatch.setenv("FREEAGENT_USE_SANDBOX", "true")
        monkeypatch.setenv("FREEAGENT_API_BASE_URL_OVERRIDE", "http://localhost:8080/")

        assert FreeAgentSettings().api_base_url == "http://localhost:8080"

    def test_missing_credentials_listed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Blank and unset credentials are both reported."""
        monkeypatch.setenv("FREEAGENT_CLIENT_ID", "abc")
        monkeypatch.setenv("FREEAGENT_CLIENT_SECRET", "   ")

        assert FreeAgentSettings().missing_credentials() == [
            "ClientSecret is required for FreeAgent authentication",
            "RefreshToken is required for FreeAgent authentication",
        ]

    def test_require_credentials_raises(self) -> None:
        """ConfigurationError lists what is missing."""
        with pytest.raises(ConfigurationError) as excinfo:
            FreeAgentSettings().require_credentials()

        assert len(excinfo.value.details["missing"]) == 3
        assert str(excinfo.value).startswith("Invalid FreeAgent configuration:")

    def test_require_credentials_returns_settings(self) -> None:
        """Complete credentials pass through."""
        settings = FreeAgentSettings(client_id="id", client_secret="secret", refresh_token="token")

        assert settings.require_credentials() is settings

    def test_project_env_file_is_read(self, isolated_env: Path) -> None:
        """A .env in the working directory is loaded."""
        (isolated_env / ".env").write_text("FREEAGENT_LOG_LEVEL=DEBUG\n", encoding="utf-8")

        assert FreeAgentSettings().log_level == "DEBUG"


class TestUserEnvFile:
    """write_user_env_vars merges into the user .env."""

    def test_write_and_merge(self, tmp_path: Path) -> None:
        """Existing keys survive, new ones are added, output is sorted."""
        env_path = tmp_path / "cfg" / ".env"
        env_path.parent.mkdir()
        env_path.write_text('# comment\nFREEAGENT_CLIENT_ID="old"\nFREEAGENT_LOG_LEVEL=INFO\n', encoding="utf-8")

        written = write_user_env_vars({"FREEAGENT_CLIENT_ID": "new", "FREEAGENT_USE_SANDBOX": "true"}, env_path)

        assert written == env_path
        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[1:] == [
            "FREEAGENT_CLIENT_ID=new",
            "FREEAGENT_LOG_LEVEL=INFO",
            "FREEAGENT_USE_SANDBOX=true",
        ]

    def test_default_location_follows_xdg(self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The user file lives under the per-user config directory."""
        monkeypatch.setattr("sys.platform", "linux")

        assert get_user_env_file().parts[-2:] == ("freeagent-domain", ".env")
