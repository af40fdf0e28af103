"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/favoritos) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rickandmorty"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rickandmorty"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rickandmorty"
    return Path.home() / ".config" / "rickandmorty"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="RICKANDMORTY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://rickandmortyapi.com/api",
        min_length=8,
        description="Base URL de la API REST de Rick and Morty.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="rickandmorty-cli/0.1",
        min_length=1,
        description="User-Agent para peticiones a la API.",
    )
    max_character_pages: int = Field(
        default=1,
        ge=1,
        le=100,
        description="Páginas de /character que recorre `fetch_all` (la app muestra la primera).",
    )
    favorites_path: Path | None = Field(
        default=None,
        description="Ruta del JSON de favoritos. Por defecto, en el directorio de config del usuario.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging para la CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def resolved_favorites_path(self) -> Path:
        """Ruta efectiva del archivo de favoritos."""

        if self.favorites_path is not None:
            return self.favorites_path
        return get_user_config_dir() / "favorites.json"
