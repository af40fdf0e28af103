"""Búsqueda de personajes por nombre (filtro en cliente)."""

from __future__ import annotations

from typing import Sequence

from core.domain.models import Character


def filter_characters(characters: Sequence[Character], query: str) -> list[Character]:
    """Devuelve los personajes cuyo nombre contiene `query` (sin distinguir mayúsculas).

    - Query vacía o solo espacios: devuelve la entrada tal cual, mismo orden.
    - Si no, la subsecuencia ordenada que coincide. La query no se recorta.
    - No muta la entrada.
    """

    if not query or query.isspace():
        return list(characters)

    needle = query.lower()
    return [character for character in characters if needle in character.name.lower()]
