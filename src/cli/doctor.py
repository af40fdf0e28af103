"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("character", params={"page": 1})
        return response.status_code == 200, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_favorites_file(path: Path) -> tuple[bool, str]:
    """The favorites file (or its parent directory) must be writable."""

    try:
        if path.exists():
            with path.open("a", encoding="utf-8"):
                pass
            return True, f"{path} (exists)"
        path.parent.mkdir(parents=True, exist_ok=True)
        marker = path.parent / "._doctor_write_check"
        marker.write_text("ok", encoding="utf-8")
        marker.unlink(missing_ok=True)
        return True, f"{path} (will be created)"
    except OSError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Rick and Morty Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Character pages", "OK", str(settings.max_character_pages))
    table.add_row("User config", "OK", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_api(settings))
    table.add_row("API connectivity", "OK" if ok_http else "FAIL", detail_http)

    ok_fav, detail_fav = _check_favorites_file(settings.resolved_favorites_path())
    table.add_row("Favorites file", "OK" if ok_fav else "FAIL", detail_fav)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Set RICKANDMORTY_API_BASE_URL if you use a mirror of the API."
        )
    if not ok_fav:
        _console.print(
            "\n[yellow]Note:[/yellow] Set RICKANDMORTY_FAVORITES_PATH to a writable location."
        )
