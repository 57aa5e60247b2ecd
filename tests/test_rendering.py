"""Tests for menu_app/rendering.py - row labels and the price summary."""

from decimal import Decimal

from menu_app.collection import MenuCollection
from menu_app.models import Course
from menu_app.rendering import (
    badge_style,
    format_averages,
    format_item_count,
    format_item_label,
    format_menu_list,
    format_price,
)


def test_format_price_uses_two_decimals():
    assert format_price(Decimal("49.9")) == "R49.90"
    assert format_price(Decimal(0)) == "R0.00"


def test_item_label_shows_name_course_and_price():
    menu = MenuCollection()
    item = menu.add("Caesar Salad", "Fresh greens", "Starter", "49.99")

    assert format_item_label(item).plain == "S Caesar Salad (Starter) - R49.99"


def test_menu_list_includes_descriptions():
    menu = MenuCollection()
    menu.add("Caesar Salad", "Fresh greens", "Starter", "49.99")
    menu.add("Malva Pudding", "Warm and sticky", "Dessert", "35")

    plain = format_menu_list(menu).plain

    assert "Caesar Salad (Starter) - R49.99\n  Fresh greens" in plain
    assert "Malva Pudding (Dessert) - R35.00\n  Warm and sticky" in plain


def test_empty_menu_list_shows_placeholder():
    assert format_menu_list([]).plain == "No menu items yet. Add some!"


def test_averages_always_lists_three_courses():
    plain = format_averages(MenuCollection().averages_by_course()).plain
    assert plain == "Average Prices:\nStarter: R0.00\nMain: R0.00\nDessert: R0.00"


def test_averages_rounding():
    menu = MenuCollection()
    for price in ("10", "10", "10.01"):
        menu.add("Steak", "Grilled", "Main", price)

    assert "Main: R10.00" in format_averages(menu.averages_by_course()).plain


def test_item_count():
    assert format_item_count(3) == "Total items: 3"


def test_badge_styles_differ_per_course():
    assert len({badge_style(course) for course in Course}) == 3


def test_negative_zero_price_renders_unsigned():
    menu = MenuCollection()
    item = menu.add("Water", "Tap", "Starter", "-0")
    assert format_item_label(item).plain == "S Water (Starter) - R0.00"
