"""Repositorio remoto: API REST de Rick and Morty.

Implementa `core.interfaces.repository.CharacterRepository` con httpx.

Reglas:
- Cualquier fallo de transporte, status no-2xx o cuerpo inválido se traduce a
  `NetworkError`. No hay reintentos: eso es cosa de quien llama.
- La deduplicación por id vive aquí, no en el Core.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from adapters.dto import (
    CharacterPageResponse,
    CharacterResponse,
    LocationPageResponse,
    page_number_from_url,
    to_character,
    to_location,
)
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import NetworkError
from core.domain.models import Character, LocationPage
from core.interfaces.repository import CharacterRepository

logger = logging.getLogger(__name__)


def dedupe_characters(characters: Sequence[Character]) -> list[Character]:
    """Elimina ids duplicados conservando la primera aparición."""

    seen: set[str] = set()
    deduped: list[Character] = []
    for character in characters:
        if character.id in seen:
            continue
        seen.add(character.id)
        deduped.append(character)
    return deduped


def _map_characters(items: Sequence[CharacterResponse]) -> list[Character]:
    out: list[Character] = []
    for item in items:
        character = to_character(item)
        if character is None:
            logger.debug("skipping character without id: %r", item.name)
            continue
        out.append(character)
    return out


class RickAndMortyApiClient(CharacterRepository):
    """Cliente de `https://rickandmortyapi.com/api`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(path, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("request to %s failed: %s", path, exc)
            raise NetworkError(f"Request to {path} failed: {exc}") from exc

        if response.status_code != 200:
            logger.warning("request to %s returned HTTP %s", path, response.status_code)
            raise NetworkError(
                f"Request to {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {path}", status_code=response.status_code) from exc

    async def fetch_all(self) -> list[Character]:
        characters: list[Character] = []
        page: int | None = None
        for _ in range(self._settings.max_character_pages):
            params = {"page": page} if page is not None else None
            payload = await self._get_json("character", params)
            try:
                parsed = CharacterPageResponse.model_validate(payload)
            except ValidationError as exc:
                raise NetworkError("Invalid character page payload") from exc

            characters.extend(_map_characters(parsed.results))
            page = page_number_from_url(parsed.info.next)
            if page is None:
                break

        logger.info("fetched %d characters", len(characters))
        return dedupe_characters(characters)

    async def fetch_page(self, cursor: int | None) -> LocationPage:
        params = {"page": cursor} if cursor is not None else None
        payload = await self._get_json("location", params)
        try:
            parsed = LocationPageResponse.model_validate(payload)
        except ValidationError as exc:
            raise NetworkError("Invalid location page payload") from exc

        locations = [loc for loc in (to_location(item) for item in parsed.results) if loc is not None]
        return LocationPage(
            locations=locations,
            next_cursor=page_number_from_url(parsed.info.next),
        )

    async def fetch_by_ids(self, ids: Sequence[str]) -> list[Character]:
        unique_ids = list(dict.fromkeys(i.strip() for i in ids if i and i.strip()))
        if not unique_ids:
            return []

        try:
            payload = await self._get_json(f"character/{','.join(unique_ids)}")
        except NetworkError as exc:
            # La API responde 404 cuando ninguno de los ids existe.
            if exc.status_code == 404:
                return []
            raise

        # Con un único id la API devuelve un objeto en vez de una lista.
        items = payload if isinstance(payload, list) else [payload]
        try:
            parsed = [CharacterResponse.model_validate(item) for item in items]
        except ValidationError as exc:
            raise NetworkError("Invalid character payload") from exc
        return dedupe_characters(_map_characters(parsed))

    async def fetch_character(self, character_id: str) -> Character:
        payload = await self._get_json(f"character/{character_id.strip()}")
        try:
            character = to_character(CharacterResponse.model_validate(payload))
        except ValidationError as exc:
            raise NetworkError("Invalid character payload") from exc
        if character is None:
            raise NetworkError(f"Character {character_id} has no id in response")
        return character
