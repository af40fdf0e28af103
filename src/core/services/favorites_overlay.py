"""Overlay de favoritos sobre la colección de personajes.

Por qué funciones puras:
- El motor no guarda estado: recibe la colección (ya filtrada) y el set de
  favoritos en cada llamada, así nunca diverge de sus entradas.
- Se puede disparar desde cualquier sustrato (callbacks, asyncio, CLI) sin
  locks, porque cada operación devuelve un valor nuevo.
"""

from __future__ import annotations

from typing import AbstractSet, Sequence

from core.domain.models import Character, DisplayEntry


def project(characters: Sequence[Character], favorites: AbstractSet[str]) -> list[DisplayEntry]:
    """Anota cada personaje con su marca de favorito.

    Mismo largo y orden que la entrada; no deduplica (eso es cosa del
    repositorio). Favoritos que no están en `characters` simplemente no aparecen.
    """

    return [
        DisplayEntry(character=character, is_favorite=character.id in favorites)
        for character in characters
    ]


def toggle(favorites: AbstractSet[str], character_id: str) -> frozenset[str]:
    """Añade `character_id` si falta, lo quita si está. Devuelve un set nuevo.

    Es legal para ids que no están cargados (p.ej. ocultos por un filtro).
    """

    if character_id in favorites:
        return frozenset(fav for fav in favorites if fav != character_id)
    return frozenset(favorites) | {character_id}


def is_favorite(favorites: AbstractSet[str], character_id: str) -> bool:
    return character_id in favorites
