"""CLI tests with ``typer.testing.CliRunner`` and an in-memory repository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from core.domain.errors import NetworkError

runner = CliRunner()


@pytest.fixture
def favorites_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "favorites.json"
    monkeypatch.setenv("RICKANDMORTY_FAVORITES_PATH", str(path))
    return path


@pytest.fixture(autouse=True)
def use_fake_repository(monkeypatch: pytest.MonkeyPatch, fake_repository):
    monkeypatch.setattr(cli_main, "build_repository", lambda settings: fake_repository)
    return fake_repository


def invoke(*args: str):
    return runner.invoke(cli_main.app, ["--no-banner", *args])


def test_characters_lists_all(favorites_path: Path) -> None:
    result = invoke("characters")

    assert result.exit_code == 0, result.output
    assert "Rick Sanchez" in result.output
    assert "Morty Smith" in result.output


def test_characters_search(favorites_path: Path) -> None:
    result = invoke("characters", "--search", "morty")

    assert result.exit_code == 0, result.output
    assert "Morty Smith" in result.output
    assert "Rick Sanchez" not in result.output


def test_characters_search_without_matches(favorites_path: Path) -> None:
    result = invoke("characters", "--search", "ZZZ")

    assert result.exit_code == 0
    assert "No characters to show" in result.output


def test_favorite_toggle_persists(favorites_path: Path) -> None:
    first = invoke("favorite", "2")
    assert first.exit_code == 0, first.output
    assert "marked as favorite" in first.output
    assert json.loads(favorites_path.read_text(encoding="utf-8")) == ["2"]

    second = invoke("favorite", "2")
    assert "removed from favorites" in second.output
    assert json.loads(favorites_path.read_text(encoding="utf-8")) == []


def test_favorites_only_filter(favorites_path: Path) -> None:
    invoke("favorite", "1")

    result = invoke("characters", "--favorites-only")

    assert result.exit_code == 0, result.output
    assert "Rick Sanchez" in result.output
    assert "Morty Smith" not in result.output


def test_favorites_command(favorites_path: Path, fake_repository) -> None:
    empty = invoke("favorites")
    assert "No favorites yet" in empty.output

    invoke("favorite", "2")
    result = invoke("favorites")

    assert result.exit_code == 0, result.output
    assert "Morty Smith" in result.output
    assert ("fetch_by_ids", ["2"]) in fake_repository.calls


def test_character_detail(favorites_path: Path) -> None:
    result = invoke("character", "1")

    assert result.exit_code == 0, result.output
    assert "Rick Sanchez" in result.output
    assert "Episodios:" in result.output


def test_characters_from_location(favorites_path: Path, fake_repository) -> None:
    result = invoke("characters", "--location", "3")

    assert result.exit_code == 0, result.output
    assert "Rick Sanchez" in result.output
    assert "Morty Smith" not in result.output
    assert ("fetch_by_ids", ["1"]) in fake_repository.calls


def test_unknown_location_is_a_usage_error(favorites_path: Path) -> None:
    result = invoke("characters", "--location", "404")

    assert result.exit_code == 2


def test_locations_paging(favorites_path: Path) -> None:
    one = invoke("locations")
    assert "Earth (C-137)" in one.output
    assert "More locations available" in one.output

    both = invoke("locations", "--pages", "5")
    assert "Citadel of Ricks" in both.output
    assert "More locations available" not in both.output


def test_network_error_exits_with_retry_hint(favorites_path: Path, fake_repository) -> None:
    fake_repository.fail_with = NetworkError("Request to character failed: timeout")

    result = invoke("characters")

    assert result.exit_code == 1
    assert "timeout" in result.output
    assert "retry" in result.output


def test_character_not_found(favorites_path: Path) -> None:
    result = invoke("character", "999")

    assert result.exit_code == 1
    assert "not found" in result.output


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.setLevel(level)
    root.handlers[:] = handlers


def test_verbose_sets_debug_logging(favorites_path: Path, restore_root_logger) -> None:
    result = runner.invoke(cli_main.app, ["--no-banner", "--verbose", "favorites"])

    assert result.exit_code == 0, result.output
    assert restore_root_logger.level == logging.DEBUG


def test_log_level_from_environment(
    favorites_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logger
) -> None:
    monkeypatch.setenv("RICKANDMORTY_LOG_LEVEL", "error")

    result = invoke("favorites")

    assert result.exit_code == 0, result.output
    assert restore_root_logger.level == logging.ERROR


def test_invalid_log_level_is_a_config_error(
    favorites_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RICKANDMORTY_LOG_LEVEL", "verbose")

    result = invoke("favorites")

    assert result.exit_code == 2
    assert "Invalid configuration" in result.output
