"""Culinary Haven CLI - Main Textual Application."""

from pathlib import Path
from typing import Optional

import httpx
import structlog
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.errors import NoWidget
from textual.widgets import Footer, Header, Static

from culinary_cli.api import ApiClient, Recipe
from culinary_cli.components import (
    NotFoundScreen,
    Pagination,
    RecipeList,
    SearchBar,
    StatusBar,
)
from culinary_cli.config import ClientSettings, get_settings
from culinary_cli.location import Location, build_url
from culinary_cli.search import PointerEvents, SearchController
from culinary_cli.search.url_sync import PAGE_PARAM, SEARCH_PARAM
from culinary_cli.theme import DARK_THEME, LIGHT_THEME, ThemeStore

logger = structlog.get_logger(__name__)


def current_page(location: Location) -> int:
    """``page`` parameter as a positive int, 1 when missing or malformed."""
    try:
        page = int(location.params.get(PAGE_PARAM, "1"))
    except ValueError:
        return 1
    return page if page >= 1 else 1


class CulinaryApp(App):
    """Culinary Haven terminal client."""

    TITLE = "Culinary Haven"
    SUB_TITLE = "Online recipes"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"
    AUTO_FOCUS = "#recipe-list"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("/", "focus_search", "Search", show=True),
        Binding("s", "toggle_search", "Toggle search"),
        Binding("t", "toggle_theme", "Theme"),
        Binding("left_square_bracket", "previous_page", "Prev page", show=False),
        Binding("right_square_bracket", "next_page", "Next page", show=False),
    ]

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        api: Optional[ApiClient] = None,
        location: Optional[Location] = None,
    ):
        super().__init__()
        self.settings = settings or get_settings()
        self.api = api or ApiClient(
            self.settings.api_url,
            timeout=self.settings.request_timeout,
        )
        self.location = location or Location()
        self.pointer_events = PointerEvents()
        self.theme_store = ThemeStore(self.settings.theme_file)
        self.search = SearchController(
            self.api,
            self.location,
            url_sync_delay=self.settings.url_sync_delay_ms / 1000,
            discard_stale=self.settings.discard_stale_suggestions,
            set_timer=lambda delay, callback: self.set_timer(delay, callback),
        )
        self.total_pages = 1
        self._favorites: set[str] = set()
        self._unsubscribe_location = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="main"):
            with Vertical(id="search-section"):
                yield SearchBar(self.search, self.pointer_events, id="search-bar")

            with Vertical(id="results-section"):
                yield Static("Loading recipes...", id="results-header")
                yield RecipeList(id="recipe-list")
                yield Pagination(id="pagination")

        yield StatusBar(id="status-bar")
        yield Footer()

    async def on_mount(self) -> None:
        """Initialize on mount."""
        saved_dark = self.theme_store.load()
        if saved_dark is not None:
            self.theme = DARK_THEME if saved_dark else LIGHT_THEME

        await self.api.open()
        self._unsubscribe_location = self.location.subscribe(self._on_navigate)

        await self._check_server()
        self._on_navigate(self.location)

    async def on_unmount(self) -> None:
        if self._unsubscribe_location is not None:
            self._unsubscribe_location()
        await self.api.close()

    async def _check_server(self) -> None:
        """Check server connection and update status."""
        status_bar = self.query_one("#status-bar", StatusBar)

        is_online = await self.api.health_check()
        status_bar.is_online = is_online

        if is_online:
            try:
                status_bar.favorites_count = await self.api.get_favorites_count()
            except httpx.HTTPError:
                logger.warning("Could not fetch favorites count", exc_info=True)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _on_navigate(self, location: Location) -> None:
        if location.path != "/":
            self.push_screen(NotFoundScreen(location.path))
            return
        self.run_worker(self._load_recipes(), exclusive=True, group="recipes")

    async def _load_recipes(self) -> None:
        """Fetch the page of recipes the address points at."""
        page = current_page(self.location)
        search = self.location.params.get(SEARCH_PARAM) or None
        header = self.query_one("#results-header", Static)

        try:
            result = await self.api.get_recipes(
                page=page,
                limit=self.settings.page_size,
                search=search,
            )
        except httpx.HTTPError as e:
            logger.error("Error loading recipes", page=page, search=search, exc_info=True)
            header.update(f"[red]Error:[/] {e}")
            return

        self.total_pages = result.total_pages
        recipe_list = self.query_one("#recipe-list", RecipeList)
        recipe_list.term = search or ""
        recipe_list.recipes = result.recipes

        pagination = self.query_one("#pagination", Pagination)
        pagination.page = result.page
        pagination.total_pages = result.total_pages
        pagination.display = bool(result.recipes)

        if not result.recipes:
            header.update("[dim]No recipes found.[/]")
        elif search:
            header.update(
                f"[bold]{result.total_found}[/] recipes for [cyan]\"{search}\"[/]"
            )
        else:
            header.update(f"[bold]{result.total_found}[/] recipes")

    def _go_to_page(self, page: int) -> None:
        params = self.location.params.set(PAGE_PARAM, str(page))
        self.location.push(build_url("/", params))

    def action_previous_page(self) -> None:
        page = current_page(self.location)
        if page > 1:
            self._go_to_page(page - 1)

    def action_next_page(self) -> None:
        page = current_page(self.location)
        if page < self.total_pages:
            self._go_to_page(page + 1)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def on_mouse_down(self, event: events.MouseDown) -> None:
        """Forward every pointer-down to the document-level observers."""
        try:
            widget, _ = self.screen.get_widget_at(event.screen_x, event.screen_y)
        except NoWidget:
            widget = None
        self.pointer_events.dispatch(widget)

    # ------------------------------------------------------------------
    # Recipes
    # ------------------------------------------------------------------

    async def on_recipe_list_add_to_shopping_list(
        self, event: RecipeList.AddToShoppingList
    ) -> None:
        """Add the selected recipe's ingredients to a new shopping list."""
        status_bar = self.query_one("#status-bar", StatusBar)
        recipe = event.recipe
        if not recipe.ingredients:
            status_bar.set_message("This recipe has no ingredients", error=True)
            return

        status_bar.is_busy = True
        try:
            count = await self.api.add_to_shopping_list(recipe)
            status_bar.set_message(f"{count} ingredients added to shopping list")
        except httpx.HTTPStatusError as e:
            logger.error("Error adding ingredients", recipe_id=recipe.id, exc_info=True)
            status_bar.set_message(_shopping_list_error(e.response.status_code), error=True)
        except httpx.HTTPError:
            logger.error("Error adding ingredients", recipe_id=recipe.id, exc_info=True)
            status_bar.set_message("Network error: Please check your connection", error=True)
        finally:
            status_bar.is_busy = False

    async def on_recipe_list_favorite_toggled(
        self, event: RecipeList.FavoriteToggled
    ) -> None:
        status_bar = self.query_one("#status-bar", StatusBar)
        recipe: Recipe = event.recipe
        favorite = recipe.id not in self._favorites
        try:
            status_bar.favorites_count = await self.api.toggle_favorite(recipe.id, on=favorite)
        except httpx.HTTPError as e:
            logger.error("Error updating favorites", recipe_id=recipe.id, exc_info=True)
            status_bar.set_message(f"Could not update favorites: {e}", error=True)
            return

        if favorite:
            self._favorites.add(recipe.id)
            status_bar.set_message(f"Saved {recipe.title}")
        else:
            self._favorites.discard(recipe.id)
            status_bar.set_message(f"Removed {recipe.title}")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_focus_search(self) -> None:
        """Focus the search bar."""
        self.query_one("#search-bar", SearchBar).focus_input()

    def action_toggle_search(self) -> None:
        self.search.on_toggle_visibility()

    def action_toggle_theme(self) -> None:
        """Flip between light and dark and remember the choice."""
        dark = self.theme != DARK_THEME
        self.theme = DARK_THEME if dark else LIGHT_THEME
        self.theme_store.save(dark)


def _shopping_list_error(status_code: int) -> str:
    if status_code == 404:
        return "Shopping list endpoint not found"
    if status_code == 401:
        return "Please sign in to add items to shopping list"
    return "Failed to add ingredients to shopping list"


def run_app(url: str = "/"):
    """Run the Culinary Haven app."""
    from culinary_cli.logs import configure_logging

    settings = get_settings()
    configure_logging(settings)
    app = CulinaryApp(settings=settings, location=Location.parse(url))
    app.run()


if __name__ == "__main__":
    run_app()
