"""Store explícito de favoritos.

Por qué un objeto y no estado global:
- Un único dueño del set de favoritos, pasado por referencia a quien lo
  necesite (CLI, holder de estado).
- Centraliza la regla "cargar una vez, guardar tras cada toggle".
"""

from __future__ import annotations

import logging

from core.interfaces.favorites import FavoritesPersistence
from core.services import favorites_overlay

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Set de favoritos en memoria respaldado por una persistencia."""

    def __init__(self, persistence: FavoritesPersistence) -> None:
        self._persistence = persistence
        self._favorites: frozenset[str] = frozenset()
        self._loaded = False

    def load(self) -> frozenset[str]:
        """Carga desde la persistencia la primera vez; luego es un no-op."""

        if not self._loaded:
            self._favorites = frozenset(self._persistence.load())
            self._loaded = True
            logger.debug("favorites loaded: %d ids", len(self._favorites))
        return self._favorites

    @property
    def favorites(self) -> frozenset[str]:
        return self.load()

    def contains(self, character_id: str) -> bool:
        return favorites_overlay.is_favorite(self.favorites, character_id)

    def toggle(self, character_id: str) -> frozenset[str]:
        """Invierte la marca de `character_id` y persiste el set resultante."""

        updated = favorites_overlay.toggle(self.favorites, character_id)
        self._persistence.save(updated)
        self._favorites = updated
        logger.info(
            "favorite %s %s",
            character_id,
            "added" if character_id in updated else "removed",
        )
        return updated
