"""DTOs de la API REST de Rick and Morty.

Por qué separados del dominio:
- La API devuelve campos opcionales, enteros como ids y objetos anidados
  (`origin: {name, url}`); el dominio quiere strings planos e inmutables.
- Todos los campos son opcionales aquí: decodificar nunca falla por un campo
  ausente, y el mapeo decide qué hacer con él.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import Character, Location


class PlaceRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    url: str | None = None


class PageInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int | None = None
    pages: int | None = None
    next: str | None = None
    prev: str | None = None


class CharacterResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | str | None = None
    name: str | None = None
    status: str | None = None
    species: str | None = None
    type: str | None = None
    gender: str | None = None
    origin: PlaceRef | None = None
    location: PlaceRef | None = None
    image: str | None = None
    episode: list[str | None] | None = Field(default=None)
    url: str | None = None
    created: str | None = None


class LocationResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    created: str | None = None
    dimension: str | None = None
    id: int | str | None = None
    name: str | None = None
    residents: list[str | None] | None = None
    type: str | None = None
    url: str | None = None


class CharacterPageResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    info: PageInfo = Field(default_factory=PageInfo)
    results: list[CharacterResponse] = Field(default_factory=list)


class LocationPageResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    info: PageInfo = Field(default_factory=PageInfo)
    results: list[LocationResponse] = Field(default_factory=list)


def to_character(dto: CharacterResponse) -> Character | None:
    """Mapea a dominio. Devuelve None si falta el id (no hay identidad estable)."""

    if dto.id is None or str(dto.id).strip() == "":
        return None
    return Character(
        id=str(dto.id),
        name=dto.name or "",
        image=dto.image or "",
        gender=dto.gender,
        status=dto.status or "",
        species=dto.species or "",
        origin=(dto.origin.name if dto.origin else None) or "",
        location=(dto.location.name if dto.location else None) or "",
        episodes=tuple(ep for ep in (dto.episode or []) if ep),
        created=dto.created or "",
    )


def to_location(dto: LocationResponse) -> Location | None:
    if dto.id is None or str(dto.id).strip() == "":
        return None
    return Location(
        id=str(dto.id),
        name=dto.name or "",
        type=dto.type or "",
        dimension=dto.dimension or "",
        residents=tuple(r for r in (dto.residents or []) if r),
    )


def page_number_from_url(url: str | None) -> int | None:
    """`.../location?page=3` -> 3. None si no hay URL o no trae `page`."""

    if not url:
        return None
    values = parse_qs(urlparse(url).query).get("page")
    if not values:
        return None
    try:
        return int(values[0])
    except ValueError:
        return None
