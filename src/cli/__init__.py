"""Main CLI application module."""

import typer

from .catalog_commands import init_db_command, list_command, serve_command

# Create the main CLI application
app = typer.Typer(
    help="🛒 Product Catalog CLI - serve the catalog and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve_command)
app.command(name="init-db")(init_db_command)
app.command(name="list")(list_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
