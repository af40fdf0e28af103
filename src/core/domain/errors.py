"""Errores del dominio.

Por qué aquí:
- Los adaptadores traducen fallos de I/O (httpx, JSON) a estos tipos, así la
  CLI y el Core no dependen de excepciones de librerías concretas.
"""

from __future__ import annotations


class RickAndMortyError(Exception):
    """Base de todos los errores propios de la aplicación."""


class NetworkError(RickAndMortyError):
    """La API no respondió, respondió con error o devolvió un cuerpo inválido."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
