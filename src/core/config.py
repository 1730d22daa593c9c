"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores (portapapeles/explorador) lean los nombres de
  comando de forma consistente.

Los valores por defecto reproducen el comportamiento clásico: `wl-copy`,
`xclip -selection clipboard` y `xdg-open`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import InvalidConfigurationError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "winpath"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "winpath"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "winpath"
    return Path.home() / ".config" / "winpath"


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

    Las claves existentes que no aparecen en `values` se conservan; las vacías
    se descartan para que vuelva a aplicar el valor por defecto.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value:
            existing[key] = value
        else:
            existing.pop(key, None)

    lines = ["# winpath user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="WINPATH_",
        extra="ignore",
        case_sensitive=False,
        env_file=str(get_user_env_file()),
        env_file_encoding="utf-8",
    )

    wl_copy_command: str = Field(
        default="wl-copy",
        min_length=1,
        description="Ejecutable de portapapeles Wayland (recibe la ruta por stdin).",
    )
    xclip_command: str = Field(
        default="xclip",
        min_length=1,
        description="Ejecutable de portapapeles X11 (recibe la ruta por stdin).",
    )
    xclip_selection: str = Field(
        default="clipboard",
        min_length=1,
        description="Valor de `-selection` para xclip.",
    )
    opener_command: str = Field(
        default="xdg-open",
        min_length=1,
        description="Mecanismo por defecto para abrir rutas en el explorador.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )


def load_settings(**overrides: object) -> AppSettings:
    """Build `AppSettings`, reporting the first invalid value as a domain error."""

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "settings"
        raise InvalidConfigurationError(field, first["msg"]) from exc
