"""Recipe list and pagination components."""

from rich.text import Text
from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import ListItem, ListView, Static

from culinary_cli.api import Recipe
from culinary_cli.search import highlight_match


class RecipeItem(ListItem):
    """Single recipe in the list."""

    def __init__(self, recipe: Recipe, index: int, term: str = "") -> None:
        super().__init__()
        self.recipe = recipe
        self.index = index
        self.term = term

    def compose(self):
        # Title line
        title_text = Text()
        title_text.append(f"[{self.index}] ", style="dim")
        start = len(title_text)
        title_text.append_text(highlight_match(self.recipe.title, self.term))
        title_text.stylize("bold", start, len(title_text))
        if self.recipe.category:
            title_text.append(f"  {self.recipe.category}", style="dim cyan")

        yield Static(title_text, classes="recipe-title")

        # Meta line
        meta_parts = []
        if self.recipe.total_minutes is not None:
            meta_parts.append(f"{self.recipe.total_minutes} min")
        if self.recipe.servings:
            meta_parts.append(f"serves {self.recipe.servings}")
        if self.recipe.ingredients:
            meta_parts.append(f"{len(self.recipe.ingredients)} ingredients")

        if meta_parts:
            yield Static(
                "    " + " • ".join(meta_parts),
                classes="recipe-meta",
            )

        if self.recipe.description:
            description = self.recipe.description[:150]
            if len(self.recipe.description) > 150:
                description += "..."
            yield Static(f"    {description}", classes="recipe-description")


class RecipeList(ListView):
    """List of recipes with keyboard navigation."""

    BINDINGS = [
        Binding("f", "favorite", "Favorite"),
    ]

    recipes: reactive[list[Recipe]] = reactive([], always_update=True)
    term: reactive[str] = reactive("")

    class AddToShoppingList(Message):
        """Emitted when a recipe is selected."""

        def __init__(self, recipe: Recipe) -> None:
            self.recipe = recipe
            super().__init__()

    class FavoriteToggled(Message):
        """Emitted when the highlighted recipe should be (un)favorited."""

        def __init__(self, recipe: Recipe) -> None:
            self.recipe = recipe
            super().__init__()

    def watch_recipes(self, recipes: list[Recipe]) -> None:
        """Update list when recipes change."""
        self.clear()
        for i, recipe in enumerate(recipes, 1):
            self.append(RecipeItem(recipe, i, self.term))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Selecting a recipe adds its ingredients to the shopping list."""
        if isinstance(event.item, RecipeItem):
            self.post_message(self.AddToShoppingList(event.item.recipe))

    def action_favorite(self) -> None:
        item = self.highlighted_child
        if isinstance(item, RecipeItem):
            self.post_message(self.FavoriteToggled(item.recipe))


class Pagination(Static):
    """Current page indicator."""

    page: reactive[int] = reactive(1)
    total_pages: reactive[int] = reactive(1)

    def render(self) -> str:
        parts = []
        if self.page > 1:
            parts.append("[dim]\\[ previous[/]")
        parts.append(f"Page [bold]{self.page}[/] of {self.total_pages}")
        if self.page < self.total_pages:
            parts.append("[dim]] next[/]")
        return "   ".join(parts)
