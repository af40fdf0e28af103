"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.gender import CharacterGender
from core.domain.models import CharacterDetail, DisplayEntry, Location

# Mismos colores que el borde de las tarjetas en la app móvil.
GENDER_STYLES: dict[CharacterGender, str] = {
    CharacterGender.MALE: "#9CE5FF",
    CharacterGender.FEMALE: "#FFB6C1",
    CharacterGender.GENDERLESS: "#FFFF88",
    CharacterGender.UNKNOWN: "grey70",
}

FAVORITE_MARK = "★"
NOT_FAVORITE_MARK = "☆"


def print_banner(console: Console) -> None:
    title = Text("Rick and Morty", style="bold green")
    subtitle = Text("Personajes • Ubicaciones • Favoritos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_characters_table(entries: Iterable[DisplayEntry], *, title: str = "Characters") -> Table:
    """Tabla de personajes con marca de favorito.

    Igual que la lista de la app, se omiten entradas sin nombre ni imagen.
    """

    table = Table(title=title)
    table.add_column("Fav", style="yellow", no_wrap=True, justify="center")
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Gender", no_wrap=True)
    table.add_column("Status", style="dim")

    for entry in entries:
        character = entry.character
        if not character.name and not character.image:
            continue
        table.add_row(
            FAVORITE_MARK if entry.is_favorite else NOT_FAVORITE_MARK,
            character.id,
            character.name,
            Text(character.gender.label(), style=GENDER_STYLES[character.gender]),
            character.status,
        )
    return table


def build_locations_table(locations: Iterable[Location]) -> Table:
    table = Table(title="Locations")
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("Dimension", style="dim")
    table.add_column("Residents", justify="right")
    for location in locations:
        table.add_row(
            location.id,
            location.name,
            location.type,
            location.dimension,
            str(len(location.residents)),
        )
    return table


def build_character_panel(detail: CharacterDetail, *, is_favorite: bool) -> Panel:
    """Panel con la ficha del personaje."""

    rows = (
        ("Estatus:", detail.status),
        ("Especie:", detail.species),
        ("Género:", detail.gender),
        ("Origen:", detail.origin),
        ("Ubicación:", detail.location),
        ("Episodios:", detail.episodes),
        ("Creado en:", detail.created),
    )
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in rows:
        grid.add_row(label, value)
    if detail.image:
        grid.add_row("Imagen:", Text(detail.image, style="link " + detail.image))

    mark = f" {FAVORITE_MARK}" if is_favorite else ""
    title = Text(f"{detail.name}{mark}", style="bold yellow" if is_favorite else "bold")
    return Panel(grid, title=title, border_style="green")
