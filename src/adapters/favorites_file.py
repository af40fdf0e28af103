"""Persistencia de favoritos en JSON.

Por qué JSON:
- Un set de strings no necesita más: lista ordenada, legible y estable en disco.

Implementa `core.interfaces.favorites.FavoritesPersistence`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import AbstractSet

from core.interfaces.favorites import FavoritesPersistence

logger = logging.getLogger(__name__)


class JsonFavoritesFile(FavoritesPersistence):
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> frozenset[str]:
        """Lee el archivo. Ausente -> set vacío; corrupto -> warning y set vacío."""

        if not self._path.exists():
            return frozenset()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("could not read favorites from %s: %s", self._path, exc)
            return frozenset()
        if not isinstance(data, list):
            logger.warning("ignoring favorites file %s: expected a JSON list", self._path)
            return frozenset()
        return frozenset(str(item) for item in data if isinstance(item, (str, int)) and str(item))

    def save(self, favorites: AbstractSet[str]) -> None:
        """Escribe el set como lista ordenada. Errores de I/O se propagan."""

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(sorted(favorites), ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
