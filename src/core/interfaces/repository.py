"""Contrato del repositorio de personajes/ubicaciones.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir la API real por un fake en tests o por otra fuente
  (caché, archivo) sin tocar el Core.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Character, LocationPage


@runtime_checkable
class CharacterRepository(Protocol):
    """Fuente remota de personajes y ubicaciones.

    Reglas de diseño:
    - Todo es asíncrono porque típicamente hará I/O (HTTP).
    - Los fallos se señalan con `core.domain.errors.NetworkError`.
    - No hay reintentos internos: reintentar es cosa de quien llama.
    """

    async def fetch_all(self) -> list[Character]:
        """Devuelve la colección de personajes."""

        ...

    async def fetch_page(self, cursor: int | None) -> LocationPage:
        """Devuelve una página de ubicaciones; `None` pide la primera."""

        ...

    async def fetch_by_ids(self, ids: Sequence[str]) -> list[Character]:
        """Devuelve los personajes con esos ids (lista vacía si `ids` está vacío)."""

        ...

    async def fetch_character(self, character_id: str) -> Character:
        """Devuelve un único personaje."""

        ...
