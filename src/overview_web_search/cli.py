from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from overview_web_search.config import Settings
from overview_web_search.extension import Extension, init
from overview_web_search.host import DEFAULT_MAX_RESULTS, OverviewSearch
from overview_web_search.metadata import load_bundled_metadata
from overview_web_search.provider import build_search_url
from overview_web_search.registry import ProviderRegistry

app = typer.Typer(help="Overview web search provider")
console = Console()


def _load_settings() -> Settings:
    try:
        settings = Settings.from_env()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    return settings


def _enabled_extension(settings: Settings, registry: ProviderRegistry) -> Extension:
    extension = init(load_bundled_metadata(), registry, settings)
    extension.enable()
    return extension


@app.command("info")
def info() -> None:
    """Show the extension metadata."""
    metadata = load_bundled_metadata()

    table = Table(title="Extension")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("uuid", metadata.uuid)
    table.add_row("name", metadata.name)
    table.add_row("description", metadata.description)
    table.add_row("url", metadata.url or "")

    console.print(table)


@app.command("url")
def url(
    terms: list[str] | None = typer.Argument(None, help="Search terms"),
) -> None:
    """Print the search URL for the given terms."""
    settings = _load_settings()
    console.print(
        build_search_url(
            terms or [], settings.url_template, encode=settings.encode_terms
        ),
        markup=False,
        soft_wrap=True,
    )


@app.command("search")
def search(
    terms: list[str] | None = typer.Argument(None, help="Search terms"),
    max_results: int = typer.Option(
        DEFAULT_MAX_RESULTS, "--max-results", "-n", min=0, help="Results per provider"
    ),
) -> None:
    """Run an overview search against the registered providers."""
    settings = _load_settings()
    registry = ProviderRegistry()
    extension = _enabled_extension(settings, registry)
    overview = OverviewSearch(registry)

    try:
        results = asyncio.run(overview.search(terms or [], max_results=max_results))
    finally:
        extension.disable()

    query = escape(" ".join(terms or []))
    table = Table(title=f"Results for '{query}'")
    table.add_column("Provider", style="cyan")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description", style="white")
    table.add_column("Icon", style="green")

    rows = 0
    for provider_results in results:
        for meta in provider_results.metas:
            table.add_row(
                provider_results.provider_id,
                meta.name,
                meta.description,
                meta.create_icon(16).icon_name,
            )
            rows += 1

    if not rows:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(table)


@app.command("open")
def open_(
    terms: list[str] | None = typer.Argument(None, help="Search terms"),
) -> None:
    """Activate the web search result, opening the default browser."""
    settings = _load_settings()
    registry = ProviderRegistry()
    extension = _enabled_extension(settings, registry)
    overview = OverviewSearch(registry)

    try:
        results = asyncio.run(overview.search(terms or []))
        for provider_results in results:
            for result_id in provider_results.result_ids:
                overview.activate(
                    provider_results.provider_id, result_id, terms or []
                )
    finally:
        extension.disable()


if __name__ == "__main__":
    app()
