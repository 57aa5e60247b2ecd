"""Rendering helpers for menu rows and the price summary."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich.text import Text

from menu_app.config import CURRENCY_SYMBOL
from menu_app.constant import EMPTY_MENU_TEXT
from menu_app.models import Course, MenuItem


def badge_style(course: Course) -> str:
    """Return a consistent badge style for course tags."""
    if course is Course.STARTER:
        return "bold #0b1f0f on #5fbf72"
    if course is Course.MAIN:
        return "bold #ffffff on #2f6db5"
    return "bold #ffffff on #b23a48"


def format_price(value: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{value:.2f}"


def format_item_label(item: MenuItem) -> Text:
    """Render `<name> (<course>) - R<price>` with a colored course tag."""
    text = Text()
    text.append(item.course.value[0], style=badge_style(item.course))
    text.append(f" {item.name} ({item.course.value}) - {format_price(item.price)}", style="bold")
    return text


def format_menu_list(items: Iterable[MenuItem]) -> Text:
    """Render every item as a label line followed by its description."""
    lines = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            lines.append("\n\n")
        lines.append_text(format_item_label(item))
        lines.append(f"\n  {item.description}")
    if not lines.plain:
        lines.append(EMPTY_MENU_TEXT, style="dim")
    return lines


def format_item_count(count: int) -> str:
    return f"Total items: {count}"


def format_averages(averages: dict[Course, Decimal]) -> Text:
    """Render the average price box, always listing all three courses."""
    text = Text()
    text.append("Average Prices:", style="bold")
    for course in Course:
        text.append(f"\n{course.value}: {format_price(averages.get(course, Decimal(0)))}")
    return text
