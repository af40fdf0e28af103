"""CLI principal (Typer).

Por qué Typer + Rich:
- Comandos tipados con ayuda autogenerada.
- Tablas/paneles legibles sin mezclar lógica de presentación con el Core.

La CLI solo orquesta: construye adaptadores a partir de `AppSettings`, llama
al Core y pinta el resultado. Los `NetworkError` se capturan aquí, en el borde.
"""

from __future__ import annotations

import asyncio
import logging
from typing import NoReturn

import typer
from rich.console import Console
from pydantic import ValidationError
from rich.logging import RichHandler
from rich.markup import escape

from adapters.favorites_file import JsonFavoritesFile
from adapters.rick_and_morty_api import RickAndMortyApiClient
from cli import doctor
from cli.ui_components import (
    build_character_panel,
    build_characters_table,
    build_locations_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import NetworkError
from core.domain.models import Location
from core.interfaces.repository import CharacterRepository
from core.services.character_detail import build_character_detail
from core.services.favorites_overlay import project
from core.services.favorites_store import FavoritesStore
from core.services.home_state import HomeState, HomeStateHolder
from core.services.location_pager import LocationPager

app = typer.Typer(
    no_args_is_help=True,
    help="Rick and Morty characters, locations and favorites from the terminal.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Instala un `RichHandler` en el logger raíz (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def build_repository(settings: AppSettings) -> CharacterRepository:
    return RickAndMortyApiClient(settings)


def build_favorites_store(settings: AppSettings) -> FavoritesStore:
    store = FavoritesStore(JsonFavoritesFile(settings.resolved_favorites_path()))
    store.load()
    return store


def _fail(message: str) -> NoReturn:
    _console.print(f"[red]Error:[/red] {escape(message)}")
    _console.print("[dim]Check your connection and run the command again to retry.[/dim]")
    raise typer.Exit(code=1)


async def _find_location(pager: LocationPager, location_id: str) -> Location | None:
    """Recorre páginas de ubicaciones hasta encontrar `location_id`."""

    while True:
        for location in pager.locations:
            if location.id == location_id:
                return location
        if await pager.load_next() is None:
            return None


async def _load_home_state(
    repository: CharacterRepository,
    store: FavoritesStore,
    *,
    search: str,
    location_id: str | None,
) -> HomeState:
    holder = HomeStateHolder(repository, store)
    if location_id:
        location = await _find_location(LocationPager(repository), location_id)
        if location is None:
            raise typer.BadParameter(f"Unknown location id: {location_id}", param_hint="--location")
        logger.info("loading %d residents of %s", len(location.residents), location.name)
        await holder.load_residents(location)
    else:
        await holder.load_characters()
    return holder.set_search_text(search)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Print the welcome banner."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


@app.command()
def characters(
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive name filter."),
    location: str | None = typer.Option(None, "--location", "-l", help="Only residents of this location id."),
    favorites_only: bool = typer.Option(False, "--favorites-only", help="Hide non-favorite characters."),
) -> None:
    """List characters with their favorite mark."""

    settings = AppSettings()
    repository = build_repository(settings)
    store = build_favorites_store(settings)

    try:
        state = asyncio.run(
            _load_home_state(repository, store, search=search, location_id=location)
        )
    except NetworkError as exc:
        _fail(str(exc))

    if state.characters.error_message is not None:
        _fail(state.characters.error_message)

    entries = [e for e in state.entries if e.is_favorite] if favorites_only else list(state.entries)
    if not entries:
        _console.print("[yellow]No characters to show.[/yellow]")
        return
    _console.print(build_characters_table(entries))


@app.command()
def character(character_id: str = typer.Argument(..., help="Character id.")) -> None:
    """Show the detail card of one character."""

    settings = AppSettings()
    repository = build_repository(settings)
    store = build_favorites_store(settings)

    try:
        found = asyncio.run(repository.fetch_character(character_id))
    except NetworkError as exc:
        _fail(str(exc))

    detail = build_character_detail(found)
    _console.print(build_character_panel(detail, is_favorite=store.contains(found.id)))


@app.command()
def favorite(character_id: str = typer.Argument(..., help="Character id to mark/unmark.")) -> None:
    """Toggle a character as favorite."""

    settings = AppSettings()
    store = build_favorites_store(settings)
    updated = store.toggle(character_id)
    if character_id in updated:
        _console.print(f"[green]★ Character {character_id} marked as favorite.[/green]")
    else:
        _console.print(f"[yellow]☆ Character {character_id} removed from favorites.[/yellow]")


@app.command()
def favorites() -> None:
    """List favorite characters."""

    settings = AppSettings()
    repository = build_repository(settings)
    store = build_favorites_store(settings)

    ids = sorted(store.favorites)
    if not ids:
        _console.print("[yellow]No favorites yet. Use `favorite <id>` to add one.[/yellow]")
        return

    try:
        found = asyncio.run(repository.fetch_by_ids(ids))
    except NetworkError as exc:
        _fail(str(exc))

    _console.print(build_characters_table(project(found, store.favorites), title="Favorites"))


@app.command()
def locations(
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="How many pages to load."),
) -> None:
    """List locations page by page."""

    settings = AppSettings()
    pager = LocationPager(build_repository(settings))

    async def _load() -> None:
        for _ in range(pages):
            if await pager.load_next() is None:
                break

    try:
        asyncio.run(_load())
    except NetworkError as exc:
        _fail(str(exc))

    _console.print(build_locations_table(pager.locations))
    if pager.has_more:
        _console.print(f"[dim]More locations available (loaded {pager.pages_loaded} page(s)).[/dim]")


def run() -> None:
    app()
