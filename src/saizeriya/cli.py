"""Command-line interface for the menu catalog."""

from __future__ import annotations

import asyncio
import json
import random
from pathlib import Path
from typing import Any, Optional

import typer

from saizeriya.catalog.provider import RemoteCatalogProvider
from saizeriya.catalog.sync import sync_catalog
from saizeriya.client import Saizeriya
from saizeriya.config import Settings, get_settings
from saizeriya.errors import CatalogLoadError
from saizeriya.logging_utils import configure_logging
from saizeriya.models.menu import MenuFilter

app = typer.Typer(help="Browse the Saizeriya menu catalog.")

DEFAULT_SYNC_OUTPUT = Path("data/menus.json")


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


def _client(ctx: typer.Context, rng: Optional[random.Random] = None) -> Saizeriya:
    try:
        return Saizeriya(settings=_settings(ctx), rng=rng)
    except ValueError as exc:
        typer.secho(f"Invalid catalog configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _emit(payload: Any, pretty: bool) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2 if pretty else None))


def _run(coro):
    try:
        return asyncio.run(coro)
    except CatalogLoadError as exc:
        typer.secho(f"Unable to load catalog: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _filter(
    category: Optional[str],
    genre: Optional[str],
    min_price: Optional[int],
    max_price: Optional[int],
    keyword: Optional[str],
) -> Optional[MenuFilter]:
    params = MenuFilter(
        category=category,
        genre=genre,
        min_price=min_price,
        max_price=max_price,
        keyword=keyword,
    )
    return None if params.is_empty() else params


@app.callback()
def main_callback(
    ctx: typer.Context,
    source: Optional[str] = typer.Option(
        None, "--source", help="Catalog source to read (bundled/file/remote)."
    ),
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog-path", help="Catalog JSON used with --source file."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override log level."),
) -> None:
    settings = get_settings()
    overrides: dict[str, Any] = {}
    if source:
        overrides["catalog_source"] = source.lower()
    if catalog_path:
        overrides["catalog_path"] = catalog_path
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        settings = settings.model_copy(update=overrides)
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = {"settings": settings}


@app.command()
def menus(
    ctx: typer.Context,
    category: Optional[str] = typer.Option(None, "--category", help="Exact category."),
    genre: Optional[str] = typer.Option(None, "--genre", help="Exact genre."),
    min_price: Optional[int] = typer.Option(None, "--min-price", help="Inclusive lower price bound."),
    max_price: Optional[int] = typer.Option(None, "--max-price", help="Inclusive upper price bound."),
    keyword: Optional[str] = typer.Option(None, "--keyword", help="Substring of the menu name."),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """List menus matching the given filters."""

    client = _client(ctx)
    params = _filter(category, genre, min_price, max_price, keyword)
    result = _run(client.all(params))
    _emit([menu.model_dump(mode="json") for menu in result], pretty)


@app.command()
def categories(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """List the distinct menu categories."""

    client = _client(ctx)
    _emit(_run(client.categories()), pretty)


@app.command()
def genres(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print output JSON."),
) -> None:
    """List the distinct menu genres."""

    client = _client(ctx)
    _emit(_run(client.genres()), pretty)


@app.command()
def show(
    ctx: typer.Context,
    menu_id: int = typer.Argument(..., help="Menu ID to display."),
    pretty: bool = typer.Option(True, "--pretty/--no-pretty", help="Pretty-print output JSON."),
) -> None:
    """Display a single menu by ID."""

    client = _client(ctx)
    menu = _run(client.get_by_id(menu_id))
    if menu is None:
        typer.secho(f"Menu {menu_id} not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    _emit(menu.model_dump(mode="json"), pretty)


@app.command("random")
def random_menus(
    ctx: typer.Context,
    budget: Optional[int] = typer.Option(None, "--budget", min=0, help="Maximum total price."),
    allow_duplicates: Optional[bool] = typer.Option(
        None,
        "--allow-duplicates/--no-duplicates",
        help="Allow the same menu to be picked more than once. Defaults to the configured setting.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a repeatable draw."),
    category: Optional[str] = typer.Option(None, "--category", help="Exact category."),
    genre: Optional[str] = typer.Option(None, "--genre", help="Exact genre."),
    min_price: Optional[int] = typer.Option(None, "--min-price", help="Inclusive lower price bound."),
    max_price: Optional[int] = typer.Option(None, "--max-price", help="Inclusive upper price bound."),
    keyword: Optional[str] = typer.Option(None, "--keyword", help="Substring of the menu name."),
    pretty: bool = typer.Option(True, "--pretty/--no-pretty", help="Pretty-print output JSON."),
) -> None:
    """Pick a random combination of menus within a budget."""

    rng = random.Random(seed) if seed is not None else None
    client = _client(ctx, rng)
    params = _filter(category, genre, min_price, max_price, keyword)
    result = _run(client.random(params, budget, allow_duplicates))
    _emit(result.model_dump(mode="json"), pretty)


@app.command()
def sync(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the catalog JSON."
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Override the upstream catalog URL."),
) -> None:
    """Download the upstream catalog and store it as a local JSON snapshot."""

    settings = _settings(ctx)
    destination = output or settings.catalog_path or DEFAULT_SYNC_OUTPUT
    provider = RemoteCatalogProvider(url or settings.catalog_url, timeout=settings.http_timeout)
    saved = _run(sync_catalog(provider, destination))
    typer.echo(f"Saved {len(saved)} menu(s) to {destination}")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m saizeriya`."""
    app(prog_name="saizeriya", args=argv)


if __name__ == "__main__":
    main()
