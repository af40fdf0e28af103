"""Unit tests covering the typed application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults() -> None:
    settings = AppSettings()

    assert settings.api_base_url == "https://rickandmortyapi.com/api"
    assert settings.max_character_pages == 1
    assert settings.http_timeout_seconds > 0


def test_env_prefix_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RICKANDMORTY_API_BASE_URL", "http://localhost:8080/api")
    monkeypatch.setenv("RICKANDMORTY_MAX_CHARACTER_PAGES", "3")

    settings = AppSettings()

    assert settings.api_base_url == "http://localhost:8080/api"
    assert settings.max_character_pages == 3


def test_dotenv_in_working_directory_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("RICKANDMORTY_HTTP_TIMEOUT_SECONDS=5\n", encoding="utf-8")

    assert AppSettings().http_timeout_seconds == 5.0


def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RICKANDMORTY_MAX_CHARACTER_PAGES", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_favorites_path_defaults_to_user_config_dir() -> None:
    assert AppSettings().resolved_favorites_path() == get_user_config_dir() / "favorites.json"


def test_favorites_path_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "favs.json"
    monkeypatch.setenv("RICKANDMORTY_FAVORITES_PATH", str(target))

    assert AppSettings().resolved_favorites_path() == target


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RICKANDMORTY_LOG_LEVEL", " debug ")

    assert AppSettings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RICKANDMORTY_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AppSettings()
