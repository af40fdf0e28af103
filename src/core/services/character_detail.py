"""Ficha de personaje: del modelo de dominio a textos de presentación."""

from __future__ import annotations

from datetime import datetime

from core.domain.models import Character, CharacterDetail

SHORT_DATETIME_FORMAT = "%d/%m/%Y %H:%M"


def format_short_datetime(value: str) -> str:
    """`2017-11-04T18:48:46.250Z` -> `04/11/2017 18:48`.

    Si el valor no se puede interpretar se devuelve tal cual.
    """

    text = value.strip()
    if not text:
        return value
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return value
    return parsed.strftime(SHORT_DATETIME_FORMAT)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def build_character_detail(character: Character) -> CharacterDetail:
    return CharacterDetail(
        id=character.id,
        name=character.name,
        image=character.image,
        status=_capitalize_first(character.status),
        species=_capitalize_first(character.species),
        gender=character.gender.label(),
        origin=_capitalize_first(character.origin),
        location=_capitalize_first(character.location),
        episodes=str(len(character.episodes)),
        created=format_short_datetime(character.created),
    )
