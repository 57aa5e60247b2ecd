"""Editable static text for notifications and form fields."""

from __future__ import annotations

# Error reasons.
MISSING_FIELD = "missing_field"
INVALID_PRICE = "invalid_price"
INVALID_COURSE = "invalid_course"
BLANK_NAME = "blank_name"
NOT_FOUND = "not_found"

NOTIFY_TITLES: dict[str, str] = {
    MISSING_FIELD: "Validation",
    INVALID_PRICE: "Validation",
    INVALID_COURSE: "Validation",
    BLANK_NAME: "Error",
    NOT_FOUND: "Not found",
    "added": "Success",
    "removed": "Removed",
}

NOTIFY_MESSAGES: dict[str, str] = {
    MISSING_FIELD: "Please fill in all fields.",
    INVALID_PRICE: "Please enter a valid positive price.",
    INVALID_COURSE: "Please choose Starter, Main or Dessert.",
    BLANK_NAME: "Enter the dish name to remove.",
    NOT_FOUND: "No menu item with that name.",
    "added": "Menu item added.",
    "removed": "Item removed successfully.",
}

NAME_PLACEHOLDER = "e.g., Caesar Salad"
DESCRIPTION_PLACEHOLDER = "Short description"
PRICE_PLACEHOLDER = "e.g., 49.99"
REMOVE_PLACEHOLDER = "Exact dish name"
EMPTY_MENU_TEXT = "No menu items yet. Add some!"
