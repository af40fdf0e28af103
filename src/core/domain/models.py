"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (`frozen=True`): un refetch reemplaza la
  colección completa, nunca la parchea.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.gender import CharacterGender


class Character(BaseModel):
    """Personaje tal como lo entrega el repositorio (ya decodificado)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Identificador estable entre fetches.",
    )
    name: str = Field(
        default="",
        description="Nombre para mostrar.",
    )
    image: str = Field(
        default="",
        description="URL del avatar.",
    )
    gender: CharacterGender = Field(
        default=CharacterGender.UNKNOWN,
        description="Género normalizado.",
    )
    status: str = Field(default="")
    species: str = Field(default="")
    origin: str = Field(
        default="",
        description="Nombre del lugar de origen.",
    )
    location: str = Field(
        default="",
        description="Nombre de la última ubicación conocida.",
    )
    episodes: tuple[str, ...] = Field(
        default=(),
        description="URLs de los episodios en los que aparece.",
    )
    created: str = Field(
        default="",
        description="Timestamp ISO de creación tal como lo entrega la API.",
    )

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: object) -> CharacterGender:
        return CharacterGender.parse(value)


class DisplayEntry(BaseModel):
    """Personaje listo para pintar, con su marca de favorito.

    Se recalcula en cada proyección; nunca se persiste.
    """

    model_config = ConfigDict(frozen=True)

    character: Character
    is_favorite: bool = False


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    type: str = Field(default="")
    dimension: str = Field(default="")
    residents: tuple[str, ...] = Field(
        default=(),
        description="URLs de los personajes residentes.",
    )

    @property
    def resident_ids(self) -> list[str]:
        """Ids de personaje derivados del último segmento de cada URL."""

        return character_ids_from_urls(self.residents)


class LocationPage(BaseModel):
    """Una página de ubicaciones y el cursor de la siguiente (si existe)."""

    locations: list[Location] = Field(default_factory=list)
    next_cursor: int | None = Field(
        default=None,
        description="Número de la siguiente página; None si es la última.",
    )


class CharacterDetail(BaseModel):
    """Modelo de presentación para la ficha de un personaje."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str
    status: str
    species: str
    gender: str
    origin: str
    location: str
    episodes: str
    created: str


def character_ids_from_urls(urls: tuple[str, ...] | list[str]) -> list[str]:
    """Extrae ids de URLs tipo `.../api/character/42`.

    Entradas vacías o sin segmento final se descartan; el orden se conserva.
    """

    ids: list[str] = []
    for url in urls:
        if not url:
            continue
        tail = url.rstrip("/").rsplit("/", 1)[-1].strip()
        if tail:
            ids.append(tail)
    return ids
