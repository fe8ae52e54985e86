"""Culinary Haven CLI - Entry Point."""

import asyncio
import sys

import click
import httpx
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from culinary_cli.api import ApiClient
from culinary_cli.config import get_settings
from culinary_cli.search import MIN_FETCH_LENGTH, highlight_match

console = Console()


def _client() -> ApiClient:
    settings = get_settings()
    return ApiClient(settings.api_url, timeout=settings.request_timeout)


@click.group(invoke_without_command=True)
@click.pass_context
def main(ctx):
    """Culinary Haven - Browse recipes from the terminal.

    Run without arguments to launch the interactive TUI.
    """
    if ctx.invoked_subcommand is None:
        from culinary_cli.app import run_app
        run_app()


@main.command()
@click.option("--url", default="/", help="Address to open, e.g. '/?search=pizza&page=2'")
def tui(url: str):
    """Launch interactive TUI."""
    from culinary_cli.app import run_app
    run_app(url)


@main.command()
@click.argument("query")
def suggest(query: str):
    """Show autocomplete suggestions for QUERY.

    Example: culinary-cli suggest piz
    """
    if not query.strip() or len(query) < MIN_FETCH_LENGTH:
        console.print(f"[yellow]Type at least {MIN_FETCH_LENGTH} characters.[/]")
        return

    async def _suggest():
        async with _client() as api:
            if not await api.health_check():
                console.print("[red]Error:[/] Server is offline. Start it with:")
                console.print("  python -m culinary")
                sys.exit(1)

            suggestions = await api.get_recipe_suggestions(query)
            if not suggestions:
                console.print("No matching suggestions found")
                return

            for suggestion in suggestions:
                line = Text("  ")
                line.append_text(highlight_match(suggestion.title, query))
                if suggestion.category:
                    line.append("  in ", style="dim")
                    line.append_text(highlight_match(suggestion.category, query))
                console.print(line)

    asyncio.run(_suggest())


@main.command()
@click.option("-p", "--page", default=1, type=click.IntRange(min=1), help="Page number")
@click.option("-s", "--search", default=None, help="Filter recipes")
@click.option("-n", "--limit", default=None, type=click.IntRange(min=1), help="Recipes per page")
def recipes(page: int, search: str, limit: int):
    """List recipes.

    Example: culinary-cli recipes --search curry
    """
    async def _recipes():
        async with _client() as api:
            if not await api.health_check():
                console.print("[red]Error:[/] Server is offline")
                sys.exit(1)

            result = await api.get_recipes(
                page=page,
                limit=limit or get_settings().page_size,
                search=search,
            )

            if not result.recipes:
                console.print("[yellow]No recipes found.[/]")
                return

            table = Table(title=f"Recipes (page {result.page} of {result.total_pages})")
            table.add_column("#", style="dim", justify="right")
            table.add_column("Title", style="bold")
            table.add_column("Category", style="cyan")
            table.add_column("Time", justify="right")
            table.add_column("Serves", justify="right")

            offset = (result.page - 1) * (limit or get_settings().page_size)
            for i, recipe in enumerate(result.recipes, offset + 1):
                minutes = recipe.total_minutes
                table.add_row(
                    str(i),
                    highlight_match(recipe.title, search or ""),
                    recipe.category or "-",
                    f"{minutes} min" if minutes is not None else "-",
                    str(recipe.servings) if recipe.servings else "-",
                )

            console.print(table)
            console.print(f"[dim]{result.total_found} recipes found[/]")

    asyncio.run(_recipes())


@main.command()
def status():
    """Show service status."""
    async def _status():
        async with _client() as api:
            is_online = await api.health_check()

            if not is_online:
                console.print(Panel(
                    "[red]● Server Offline[/]\n\n"
                    "Start the server with:\n"
                    "  python -m culinary",
                    title="Culinary Haven",
                ))
                return

            try:
                status = await api.get_status()
                favorites = await api.get_favorites_count()
            except httpx.HTTPError as e:
                console.print(f"[red]Error:[/] {e}")
                sys.exit(1)

            console.print()
            console.print(f"[green]● Server Online[/] v{status.version}")
            console.print(
                f"Catalog: [bold]{status.total_recipes:,}[/] recipes, "
                f"[bold]{status.shopping_lists:,}[/] shopping lists, "
                f"[bold]{favorites:,}[/] favorites\n"
            )

    asyncio.run(_status())


if __name__ == "__main__":
    main()
