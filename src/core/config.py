"""Configuración del Core.

- Centraliza variables de entorno (pydantic-settings) para la CLI y para
  quien quiera construir clientes desde el entorno.
- `AppSettings.to_client_config()` produce el `ClientConfig` de una fachada.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import ClientConfig


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "typesync"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "typesync"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "typesync"
    return Path.home() / ".config" / "typesync"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _parse_env_lines(text: str) -> dict[str, str]:
    """`CLAVE=valor` por línea; acepta el prefijo `export` y comillas simples o dobles."""

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if line.startswith("#") or not sep or not key:
            continue
        data[key] = _unquote(value.strip())
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env de usuario; un valor `None` borra la clave."""

    env_path = env_path or get_user_env_file()
    current = _parse_env_lines(env_path.read_text(encoding="utf-8")) if env_path.exists() else {}

    for key, value in values.items():
        if value is None:
            current.pop(key, None)
        else:
            current[key] = value

    body = "".join(f"{key}={current[key]}\n" for key in sorted(current))
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("# typesync user config\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central leída del entorno (`TYPESYNC_*`)."""

    model_config = SettingsConfigDict(
        env_prefix="TYPESYNC_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:8000",
        min_length=1,
        description="URL base del API.",
    )
    auth_token: str | None = Field(
        default=None,
        description="Token bearer inyectado como header Authorization.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Timeout por intento (segundos); 0 lo desactiva.",
    )
    retries: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Reintentos tras el primer fallo.",
    )
    retry_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Espera entre intentos (segundos).",
    )

    def to_client_config(self) -> ClientConfig:
        headers: dict[str, str] = {}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return ClientConfig(
            base_url=self.base_url,
            headers=headers,
            timeout_seconds=self.timeout_seconds,
            retries=self.retries,
            retry_delay_seconds=self.retry_delay_seconds,
        )
