"""Shared fixtures for the Rick and Morty client tests."""

from __future__ import annotations

from typing import AbstractSet, Callable, Sequence

import pytest

from core.domain.errors import NetworkError
from core.domain.models import Character, Location, LocationPage


class FakeRepository:
    """In-memory ``CharacterRepository`` with scriptable failures."""

    def __init__(
        self,
        characters: Sequence[Character] = (),
        location_pages: Sequence[LocationPage] = (),
    ) -> None:
        self.characters = list(characters)
        self.location_pages = list(location_pages)
        self.fail_with: NetworkError | None = None
        self.calls: list[tuple[str, object]] = []

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def fetch_all(self) -> list[Character]:
        self.calls.append(("fetch_all", None))
        self._maybe_fail()
        return list(self.characters)

    async def fetch_page(self, cursor: int | None) -> LocationPage:
        self.calls.append(("fetch_page", cursor))
        self._maybe_fail()
        index = 0 if cursor is None else cursor - 1
        return self.location_pages[index]

    async def fetch_by_ids(self, ids: Sequence[str]) -> list[Character]:
        self.calls.append(("fetch_by_ids", list(ids)))
        self._maybe_fail()
        wanted = set(ids)
        return [c for c in self.characters if c.id in wanted]

    async def fetch_character(self, character_id: str) -> Character:
        self.calls.append(("fetch_character", character_id))
        self._maybe_fail()
        for c in self.characters:
            if c.id == character_id:
                return c
        raise NetworkError(f"Character {character_id} not found", status_code=404)


class InMemoryFavorites:
    """``FavoritesPersistence`` that records every save."""

    def __init__(self, initial: AbstractSet[str] = frozenset()) -> None:
        self.stored = frozenset(initial)
        self.saves: list[frozenset[str]] = []
        self.loads = 0

    def load(self) -> frozenset[str]:
        self.loads += 1
        return self.stored

    def save(self, favorites: AbstractSet[str]) -> None:
        self.stored = frozenset(favorites)
        self.saves.append(self.stored)


@pytest.fixture
def make_character() -> Callable[..., Character]:
    def _make(id: str, name: str = "", **kwargs: object) -> Character:
        return Character(id=id, name=name or f"Character {id}", **kwargs)

    return _make


@pytest.fixture
def rick_and_morty(make_character) -> list[Character]:
    return [
        make_character("1", "Rick Sanchez", gender="Male", image="https://img/1.jpeg"),
        make_character("2", "Morty Smith", gender="Male", image="https://img/2.jpeg"),
    ]


@pytest.fixture
def location_pages() -> list[LocationPage]:
    return [
        LocationPage(
            locations=[
                Location(
                    id="1",
                    name="Earth (C-137)",
                    type="Planet",
                    dimension="Dimension C-137",
                    residents=(
                        "https://rickandmortyapi.com/api/character/38",
                        "https://rickandmortyapi.com/api/character/45",
                    ),
                ),
            ],
            next_cursor=2,
        ),
        LocationPage(
            locations=[
                Location(
                    id="3",
                    name="Citadel of Ricks",
                    type="Space station",
                    residents=("https://rickandmortyapi.com/api/character/1",),
                ),
            ],
            next_cursor=None,
        ),
    ]


@pytest.fixture
def fake_repository(rick_and_morty, location_pages) -> FakeRepository:
    return FakeRepository(rick_and_morty, location_pages)


@pytest.fixture
def memory_favorites() -> InMemoryFavorites:
    return InMemoryFavorites()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep every test away from real `.env` files and the user config dir."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in (
        "RICKANDMORTY_API_BASE_URL",
        "RICKANDMORTY_HTTP_TIMEOUT_SECONDS",
        "RICKANDMORTY_MAX_CHARACTER_PAGES",
        "RICKANDMORTY_FAVORITES_PATH",
        "RICKANDMORTY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
