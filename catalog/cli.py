"""
CLI tool for catalog database management.

Provides commands for creating the catalog tables and inspecting the
stored records.
"""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from catalog.exceptions import DatabaseError
from catalog.services.catalog import Catalog
from catalog.settings import app_settings
from catalog.storage.db import CatalogStore

T = TypeVar("T")

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Library Catalog Management CLI - Create tables and inspect records",
    add_completion=False,
)
console = Console()


class EntityName(str, Enum):
    AUTHORS = "authors"
    BOOKS = "books"
    BOOK_INSTANCES = "book-instances"
    GENRES = "genres"


def _run(action: Callable[[Catalog], Awaitable[T]], url: str | None) -> T:
    """
    Run an async action against a freshly opened store.

    The store is disposed afterwards. Database errors exit with code 1.
    """

    async def runner() -> T:
        store = CatalogStore.from_url(url) if url else CatalogStore()
        try:
            return await action(Catalog(store))
        finally:
            await store.dispose()

    try:
        return asyncio.run(runner())
    except DatabaseError as ex:
        console.print(f"[red]✗ {ex.message}[/red]")
        raise typer.Exit(code=1)


DatabaseUrlOption = typer.Option(
    None,
    "--database-url",
    help="Database URL (defaults to DATABASE_URL)",
)


@typer_app.command(name="init-db")
def init_db(
    wait: bool = typer.Option(
        False, "--wait", help="Retry until the database is reachable"
    ),
    database_url: str | None = DatabaseUrlOption,
):
    """
    Create the catalog tables that do not exist yet.

    Example:
        catalog-cli init-db --wait
    """

    async def action(catalog: Catalog) -> None:
        if wait:
            await catalog.store.wait_and_init_db()
        else:
            await catalog.store.init_db()

    try:
        _run(action, database_url)
    except RuntimeError as ex:
        console.print(f"[red]✗ {ex}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]✓[/green] Tables ready at "
        f"[cyan]{database_url or app_settings.DATABASE_URL}[/cyan]"
    )


@typer_app.command(name="summary")
def summary(database_url: str | None = DatabaseUrlOption):
    """
    Display record counts of every entity type.

    Example:
        catalog-cli summary
    """
    counts = _run(lambda catalog: catalog.summary(), database_url)

    console.print()
    console.print(
        Panel.fit("[bold cyan]Library Catalog[/bold cyan]", border_style="cyan")
    )
    table = Table("Records", "Count", show_lines=True)
    table.add_row("Books", str(counts.book_count))
    table.add_row("Copies", str(counts.book_instance_count))
    table.add_row("Copies available", str(counts.book_instance_available_count))
    table.add_row("Authors", str(counts.author_count))
    table.add_row("Genres", str(counts.genre_count))
    console.print(table)
    console.print()


def _rows(entity: EntityName, items: list[Any]) -> tuple[tuple[str, ...], list[tuple[str, ...]]]:
    if entity is EntityName.AUTHORS:
        return ("ID", "Name", "Lifespan"), [
            (str(a.id), a.name, a.lifespan) for a in items
        ]
    if entity is EntityName.BOOKS:
        return ("ID", "Title", "Author", "ISBN"), [
            (str(row.book.id), row.book.title, row.author.name, row.book.isbn)
            for row in items
        ]
    if entity is EntityName.BOOK_INSTANCES:
        return ("ID", "Book", "Imprint", "Status", "Due back"), [
            (
                str(row.instance.id),
                row.book.title if row.book else "[dim]-[/dim]",
                row.instance.imprint,
                str(row.instance.status.value),
                row.instance.due_back_formatted,
            )
            for row in items
        ]
    return ("ID", "Name"), [(str(g.id), g.name) for g in items]


@typer_app.command(name="list")
def list_records(
    entity: EntityName = typer.Argument(..., help="Records to list"),
    database_url: str | None = DatabaseUrlOption,
):
    """
    Display a table of all records of one entity type.

    Example:
        catalog-cli list books
    """
    lifecycle = {
        EntityName.AUTHORS: lambda c: c.authors,
        EntityName.BOOKS: lambda c: c.books,
        EntityName.BOOK_INSTANCES: lambda c: c.book_instances,
        EntityName.GENRES: lambda c: c.genres,
    }[entity]
    items = _run(lambda catalog: lifecycle(catalog).list(), database_url)

    columns, rows = _rows(entity, items)
    table = Table(*columns, title=entity.value.replace("-", " ").title())
    for row in rows:
        table.add_row(*row)
    console.print(table)
    console.print(f"[bold]Total:[/bold] {len(rows)}")


def main() -> None:
    typer_app()


if __name__ == "__main__":
    main()
