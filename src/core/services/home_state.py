"""Home screen state holder.

This module is the glue between the repository, the favorites store and the
search box. It owns the only mutable bits of the home screen (last fetched
collection, search text) and republishes an immutable ``HomeState`` to every
listener whenever one of the inputs changes. The display entries are always
rebuilt from scratch with ``filter_characters`` + ``project``; there is no
incremental patching, so a published favorite flag always matches the
favorites set it was computed from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable

from core.domain.errors import NetworkError
from core.domain.models import Character, DisplayEntry, Location
from core.interfaces.repository import CharacterRepository
from core.services.favorites_overlay import project
from core.services.favorites_store import FavoritesStore
from core.services.search_filter import filter_characters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacterListState:
    """Result of the last character load (loading flag, error or data)."""

    is_loading: bool = False
    error_message: str | None = None
    data: tuple[Character, ...] | None = None


@dataclass(frozen=True)
class HomeState:
    """Everything the home screen needs to render, as one snapshot."""

    characters: CharacterListState = field(default_factory=CharacterListState)
    search_text: str = ""
    favorite_ids: frozenset[str] = frozenset()
    entries: tuple[DisplayEntry, ...] = ()


HomeStateListener = Callable[[HomeState], None]


class HomeStateHolder:
    """Combines repository results, search text and favorites into ``HomeState``."""

    def __init__(self, repository: CharacterRepository, favorites: FavoritesStore) -> None:
        self._repository = repository
        self._favorites = favorites
        self._listeners: list[HomeStateListener] = []
        self._characters = CharacterListState()
        self._search_text = ""
        self._state = self._compute()

    @property
    def state(self) -> HomeState:
        return self._state

    def subscribe(self, listener: HomeStateListener) -> Callable[[], None]:
        """Register ``listener`` and call it once with the current state.

        Returns a callable that removes the listener.
        """

        self._listeners.append(listener)
        listener(self._state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def load_characters(self) -> HomeState:
        """Fetch the character collection (the pull-to-refresh / retry action)."""

        return await self._load(self._repository.fetch_all)

    async def load_residents(self, location: Location) -> HomeState:
        """Replace the collection with the residents of ``location``."""

        ids = location.resident_ids

        async def fetch() -> list[Character]:
            return await self._repository.fetch_by_ids(ids)

        return await self._load(fetch)

    def set_search_text(self, text: str) -> HomeState:
        self._search_text = text
        return self._publish()

    def toggle_favorite(self, character_id: str) -> HomeState:
        self._favorites.toggle(character_id)
        return self._publish()

    async def _load(self, fetch: Callable[[], Awaitable[list[Character]]]) -> HomeState:
        self._characters = replace(self._characters, is_loading=True, error_message=None)
        self._publish()
        try:
            characters = await fetch()
        except NetworkError as exc:
            logger.warning("character load failed: %s", exc)
            # Last-known-good data stays on screen next to the error.
            self._characters = replace(
                self._characters,
                is_loading=False,
                error_message=str(exc) or "Network error",
            )
            return self._publish()
        except Exception:
            # Unexpected failures propagate, but never leave the screen loading.
            self._characters = replace(self._characters, is_loading=False)
            self._publish()
            raise

        self._characters = CharacterListState(data=tuple(characters))
        return self._publish()

    def _compute(self) -> HomeState:
        favorites = self._favorites.favorites
        data = self._characters.data or ()
        visible = filter_characters(data, self._search_text)
        return HomeState(
            characters=self._characters,
            search_text=self._search_text,
            favorite_ids=favorites,
            entries=tuple(project(visible, favorites)),
        )

    def _publish(self) -> HomeState:
        self._state = self._compute()
        for listener in list(self._listeners):
            listener(self._state)
        return self._state
