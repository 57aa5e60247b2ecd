"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from textual.app import App
from textual.screen import Screen

from menu_app.add_item_screen import AddItemScreen
from menu_app.collection import MenuCollection
from menu_app.config import APP_SUB_TITLE, APP_TITLE, resolve_debug_log_path
from menu_app.home_screen import HomeScreen


class MenuApp(App):
    """A Textual app for building a course menu and comparing its prices."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, menu: MenuCollection | None = None) -> None:
        super().__init__()
        self.menu = menu if menu is not None else MenuCollection()
        self.system_status = ""
        self._debug_log_path = Path(resolve_debug_log_path())
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def get_default_screen(self) -> Screen:
        return HomeScreen(self.menu, on_open_form=self.open_form, on_sorted=self._on_sorted)

    def on_mount(self) -> None:
        self._log_debug(f"on_mount items={len(self.menu)} log={self._debug_log_path}")

    def open_form(self) -> None:
        self._log_debug("screen_switch to=add_form")
        self.push_screen(AddItemScreen(self.menu, report=self.report), callback=self._on_form_closed)

    def _on_form_closed(self, _result: None) -> None:
        self._log_debug(f"screen_switch to=home items={len(self.menu)}")

    def _on_sorted(self, key: str) -> None:
        self.system_status = f"Sorted by {key}"
        self._log_debug(f"sort key={key} order={[item.id[:8] for item in self.menu]}")

    def report(self, event: str, title: str, message: str, is_error: bool) -> None:
        """Record an action outcome in the status line, the debug log and a notification."""
        self.system_status = message
        self._log_debug(event)
        self.notify(message, title=title, severity="error" if is_error else "information")
