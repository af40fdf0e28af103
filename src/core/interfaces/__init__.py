"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.favorites import FavoritesPersistence
from core.interfaces.repository import CharacterRepository

__all__ = [
    "CharacterRepository",
    "FavoritesPersistence",
]
