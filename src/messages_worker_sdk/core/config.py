"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) para la librería y la CLI.
- El cliente recibe un `ClientSettings` explícito; no existe un singleton global.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:8083"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "messages-worker-sdk/0.1"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "messages-worker-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "messages-worker-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "messages-worker-sdk"
    return Path.home() / ".config" / "messages-worker-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; `None` no sobrescribe nada.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# messages-worker-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración inmutable del cliente messages-worker.

    Prioridad de valores:
    - argumentos explícitos
    - variables de entorno `MESSAGES_WORKER_*`
    - `.env` del proyecto y luego el `.env` global del usuario
    - defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="MESSAGES_WORKER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description="URL base del servicio messages-worker.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=0,
        description="Timeout por request (segundos). 0 equivale al default.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def unset_timeout_as_default(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_TIMEOUT_SECONDS
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def zero_timeout_as_default(cls, value: float) -> float:
        return value or DEFAULT_TIMEOUT_SECONDS


def default_settings() -> ClientSettings:
    """Configuración por defecto, ignorando entorno y ficheros `.env`."""

    return ClientSettings.model_construct(
        base_url=DEFAULT_BASE_URL,
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        user_agent=DEFAULT_USER_AGENT,
    )
