"""Entry point for the course menu Textual app."""

from __future__ import annotations

from menu_app.menu_app import MenuApp


def main() -> None:
    """Run the Textual application."""
    MenuApp().run()


if __name__ == "__main__":
    main()
