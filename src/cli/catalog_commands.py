"""Catalog CLI commands."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.catalog.core.models.pagination import Pageable
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.core.services.product_service import ProductService
from src.catalog.entities.product import ProductRepository
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db

console = Console()


def serve_command(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the catalog web server.

    Host and port default to the values in config.yaml.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Serving {config.app.name} on http://{host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,  # We handle access logging in middleware
    )


def init_db_command(
    reset: bool = typer.Option(False, "--reset", help="Drop all tables first"),
    seed: bool = typer.Option(True, "--seed/--no-seed", help="Insert sample products into an empty store"),
) -> None:
    """🗄️  Create the database tables and seed sample products."""
    database_service = DbSessionService()
    try:
        if reset:
            DbManageService(database_service).drop_all()
            console.print("[yellow]Dropped all tables[/yellow]")
        seeded = init_db(database_service, seed=seed)
    finally:
        database_service.dispose()

    console.print("[green]✅ Database ready[/green]")
    if seeded:
        console.print(f"[green]Seeded {seeded} sample products[/green]")


def list_command(
    query: str | None = typer.Option(None, "--query", "-q", help="Name search term"),
    page: int = typer.Option(0, "--page", "-p", min=0, help="Zero-based page index"),
    size: int | None = typer.Option(None, "--size", "-s", min=1, help="Page size"),
    sort: str | None = typer.Option(None, "--sort", help="Sort field"),
    direction: str = typer.Option("asc", "--dir", help="Sort direction (asc, desc)"),
) -> None:
    """📋 Print a page of products."""
    cfg = get_config().catalog
    try:
        pageable = Pageable(
            page=page,
            size=size or cfg.default_page_size,
            sort_field=sort or cfg.default_sort,
            direction=direction,
        )
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=2) from e

    database_service = DbSessionService()
    try:
        service = ProductService(ProductRepository(database_service))
        result = service.list_products(query, pageable)
    finally:
        database_service.dispose()

    if not result.items:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Active", style="yellow")
    for product in result.items:
        table.add_row(
            str(product.id),
            product.name,
            f"{product.price:.2f}",
            str(product.stock),
            "✅" if product.active else "❌",
        )

    console.print(table)
    console.print(
        f"\n[green]Page {result.page + 1} of {max(result.total_pages, 1)}"
        f" ({result.total_elements} products)[/green]"
    )
