"""Paginación incremental de ubicaciones.

Acumula páginas de `CharacterRepository.fetch_page` en orden, siguiendo el
cursor que devuelve cada página. Un fallo deja intacto lo ya acumulado.
"""

from __future__ import annotations

import logging

from core.domain.models import Location, LocationPage
from core.interfaces.repository import CharacterRepository

logger = logging.getLogger(__name__)


class LocationPager:
    def __init__(self, repository: CharacterRepository) -> None:
        self._repository = repository
        self._pages: list[LocationPage] = []
        self._next_cursor: int | None = None

    @property
    def locations(self) -> list[Location]:
        return [location for page in self._pages for location in page.locations]

    @property
    def pages_loaded(self) -> int:
        return len(self._pages)

    @property
    def has_more(self) -> bool:
        """True hasta que se carga una página sin cursor siguiente."""

        return not self._pages or self._next_cursor is not None

    async def load_next(self) -> LocationPage | None:
        """Carga y acumula la siguiente página. Devuelve None si ya no hay más."""

        if not self.has_more:
            return None

        cursor = self._next_cursor
        page = await self._repository.fetch_page(cursor)
        self._pages.append(page)
        self._next_cursor = page.next_cursor
        logger.debug(
            "location page loaded (cursor=%s, items=%d, next=%s)",
            cursor,
            len(page.locations),
            page.next_cursor,
        )
        return page

    async def refresh(self) -> LocationPage:
        """Vuelve a cargar la primera página y descarta lo acumulado.

        Lo acumulado solo se reemplaza si la primera página llega bien.
        """

        page = await self._repository.fetch_page(None)
        self._pages = [page]
        self._next_cursor = page.next_cursor
        return page
