"""Home screen: item count, average prices, sort actions and the menu list."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from menu_app.collection import MenuCollection
from menu_app.config import FADE_DURATION_SECONDS, FADE_START_OPACITY
from menu_app.rendering import format_averages, format_item_count, format_menu_list


class HomeScreen(Screen[None]):
    """Summary of the current menu with sort triggers."""

    BINDINGS = [
        ("a", "open_form", "Add / remove"),
        ("c", "sort_by_course", "Sort by course"),
        ("p", "sort_by_price", "Sort by price"),
    ]

    CSS = """
    #home-layout {
        padding: 1 2;
    }

    #item-count {
        text-style: bold;
        margin-top: 1;
    }

    #averages {
        border: round $secondary;
        padding: 0 1;
        margin-top: 1;
        height: auto;
    }

    #sort-row {
        height: auto;
        margin-top: 1;
    }

    #sort-row Button {
        width: 1fr;
        margin-right: 1;
    }

    #menu-list {
        border: tall $surface;
        padding: 0 1;
        margin-top: 1;
        height: auto;
    }
    """

    def __init__(
        self,
        menu: MenuCollection,
        on_open_form: Callable[[], None],
        on_sorted: Callable[[str], None],
    ) -> None:
        super().__init__()
        self.menu = menu
        self.on_open_form = on_open_form
        self.on_sorted = on_sorted
        self._last_count: int | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="home-layout"):
            yield Button("Add Menu Item", id="open-form", variant="primary")
            yield Static(id="item-count")
            yield Static(id="averages")
            with Horizontal(id="sort-row"):
                yield Button("Sort by Course", id="sort-course")
                yield Button("Sort by Price", id="sort-price")
            yield Static(id="menu-list")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_menu()

    def on_screen_resume(self) -> None:
        self.refresh_menu()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-form":
            self.action_open_form()
        elif event.button.id == "sort-course":
            self.action_sort_by_course()
        elif event.button.id == "sort-price":
            self.action_sort_by_price()

    def action_open_form(self) -> None:
        self.on_open_form()

    def action_sort_by_course(self) -> None:
        self.menu.sort_by_course()
        self.on_sorted("course")
        self.refresh_menu()

    def action_sort_by_price(self) -> None:
        self.menu.sort_by_price()
        self.on_sorted("price")
        self.refresh_menu()

    def refresh_menu(self) -> None:
        try:
            count_widget = self.query_one("#item-count", Static)
            averages_widget = self.query_one("#averages", Static)
            menu_list = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        count_widget.update(format_item_count(len(self.menu)))
        averages_widget.update(format_averages(self.menu.averages_by_course()))
        menu_list.update(format_menu_list(self.menu))

        count = len(self.menu)
        if self._last_count is not None and count != self._last_count:
            menu_list.styles.opacity = FADE_START_OPACITY
            menu_list.styles.animate("opacity", value=1.0, duration=FADE_DURATION_SECONDS)
        self._last_count = count
