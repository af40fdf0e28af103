"""Contrato de persistencia de favoritos."""

from __future__ import annotations

from typing import AbstractSet, Protocol, runtime_checkable


@runtime_checkable
class FavoritesPersistence(Protocol):
    """Guarda y recupera el conjunto de ids favoritos.

    Se asume durable y síncrono desde el punto de vista del Core: se llama a
    `load` una vez al arrancar y a `save` después de cada toggle.
    """

    def load(self) -> frozenset[str]:
        ...

    def save(self, favorites: AbstractSet[str]) -> None:
        ...
