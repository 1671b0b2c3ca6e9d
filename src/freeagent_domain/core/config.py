"""Configuración del layer (pydantic-settings).

Por qué aquí:
- Centraliza variables de entorno sin contaminar la CLI.
- El cliente HTTP externo lee de aquí la URL base (producción o sandbox) y
  las credenciales OAuth2; este paquete solo las valida.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from freeagent_domain.core.errors import ConfigurationError

PRODUCTION_API_BASE_URL = "https://api.freeagent.com"
SANDBOX_API_BASE_URL = "https://api.sandbox.freeagent.com"

_CREDENTIAL_MESSAGES = {
    "client_id": "ClientId is required for FreeAgent authentication",
    "client_secret": "ClientSecret is required for FreeAgent authentication",
    "refresh_token": "RefreshToken is required for FreeAgent authentication",
}


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "freeagent-domain"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "freeagent-domain"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "freeagent-domain"
    return Path.home() / ".config" / "freeagent-domain"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# freeagent-domain user config (.env)"]
    for key in sorted(existing):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class FreeAgentSettings(BaseSettings):
    """Configuración central.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env).
    - Un único contrato de configuración para CLI y cliente HTTP externo.
    """

    model_config = SettingsConfigDict(
        env_prefix="FREEAGENT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    use_sandbox: bool = Field(
        default=False,
        description="Usar https://api.sandbox.freeagent.com en vez de producción.",
    )
    api_base_url_override: AnyHttpUrl | None = Field(
        default=None,
        description="URL base explícita (tests/proxies); tiene prioridad sobre use_sandbox.",
    )

    client_id: str | None = Field(default=None, description="OAuth2 client id de la app FreeAgent.")
    client_secret: str | None = Field(default=None, description="OAuth2 client secret.")
    refresh_token: str | None = Field(default=None, description="Refresh token OAuth2 de larga duración.")

    log_level: str = Field(
        default="WARNING",
        description="Nivel de log de structlog (DEBUG, INFO, WARNING, ERROR).",
    )
    json_indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentación al exportar JSON (None = compacto).",
    )

    @property
    def api_base_url(self) -> str:
        if self.api_base_url_override is not None:
            return str(self.api_base_url_override).rstrip("/")
        return SANDBOX_API_BASE_URL if self.use_sandbox else PRODUCTION_API_BASE_URL

    @property
    def authorization_endpoint(self) -> str:
        return f"{self.api_base_url}/v2/approve_app"

    @property
    def token_endpoint(self) -> str:
        return f"{self.api_base_url}/v2/token_endpoint"

    def missing_credentials(self) -> list[str]:
        """Messages for every OAuth2 credential that is unset or blank."""

        return [
            message
            for name, message in _CREDENTIAL_MESSAGES.items()
            if not (getattr(self, name) or "").strip()
        ]

    def require_credentials(self) -> FreeAgentSettings:
        missing = self.missing_credentials()
        if missing:
            raise ConfigurationError(
                f"Invalid FreeAgent configuration: {'; '.join(missing)}",
                details={"missing": missing},
            )
        return self
