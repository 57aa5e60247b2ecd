"""Form screen for adding dishes and removing them by name."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, RadioButton, RadioSet, Static

from menu_app.collection import MenuCollection
from menu_app.constant import (
    DESCRIPTION_PLACEHOLDER,
    NAME_PLACEHOLDER,
    NOTIFY_MESSAGES,
    NOTIFY_TITLES,
    PRICE_PLACEHOLDER,
    REMOVE_PLACEHOLDER,
)
from menu_app.errors import MenuError
from menu_app.models import Course

# Callback signature: (event, title, message, is_error).
ReportCallback = Callable[[str, str, str, bool], None]


class AddItemScreen(Screen[None]):
    """Add-item form plus remove-by-name form."""

    BINDINGS = [
        ("escape", "back", "Back to Home"),
    ]

    CSS = """
    #form-layout {
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        text-align: center;
        width: 100%;
        margin-bottom: 1;
    }

    .field-label {
        text-style: bold;
        margin-top: 1;
    }

    #course-select {
        layout: horizontal;
        width: 100%;
        height: auto;
    }

    .form-actions {
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(self, menu: MenuCollection, report: ReportCallback) -> None:
        super().__init__()
        self.menu = menu
        self.report = report

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="form-layout"):
            yield Static("Add Menu Item", id="form-title")
            yield Label("Dish Name", classes="field-label")
            yield Input(placeholder=NAME_PLACEHOLDER, id="name-input")
            yield Label("Description", classes="field-label")
            yield Input(placeholder=DESCRIPTION_PLACEHOLDER, id="description-input")
            yield Label("Course", classes="field-label")
            with RadioSet(id="course-select"):
                for course in Course:
                    yield RadioButton(course.value, value=course is Course.STARTER)
            yield Label("Price (R)", classes="field-label")
            yield Input(placeholder=PRICE_PLACEHOLDER, id="price-input")
            with Horizontal(classes="form-actions"):
                yield Button("Add Item", id="add-item", variant="primary")

            yield Label("Remove Dish by Name", classes="field-label")
            yield Input(placeholder=REMOVE_PLACEHOLDER, id="remove-name-input")
            with Horizontal(classes="form-actions"):
                yield Button("Remove Item", id="remove-item", variant="error")

            with Horizontal(classes="form-actions"):
                yield Button("Back to Home", id="back-home")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#name-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-item":
            self.action_add_item()
        elif event.button.id == "remove-item":
            self.action_remove_item()
        elif event.button.id == "back-home":
            self.action_back()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "price-input":
            self.action_add_item()
        elif event.input.id == "remove-name-input":
            self.action_remove_item()

    def action_back(self) -> None:
        self.dismiss(None)

    def selected_course(self) -> Course:
        index = self.query_one("#course-select", RadioSet).pressed_index
        courses = list(Course)
        if not (0 <= index < len(courses)):
            return Course.STARTER
        return courses[index]

    def action_add_item(self) -> None:
        name_input = self.query_one("#name-input", Input)
        description_input = self.query_one("#description-input", Input)
        price_input = self.query_one("#price-input", Input)
        try:
            item = self.menu.add(name_input.value, description_input.value, self.selected_course(), price_input.value)
        except MenuError as exc:
            self.report(f"add_rejected reason={exc.reason}", exc.title, exc.message, True)
            return

        name_input.value = ""
        description_input.value = ""
        price_input.value = ""
        name_input.focus()
        self.report(
            f"add_ok id={item.id} name={item.name!r} course={item.course.value} price={item.price}",
            NOTIFY_TITLES["added"],
            NOTIFY_MESSAGES["added"],
            False,
        )

    def action_remove_item(self) -> None:
        remove_input = self.query_one("#remove-name-input", Input)
        try:
            remaining = self.menu.remove(remove_input.value)
        except MenuError as exc:
            self.report(f"remove_rejected reason={exc.reason} name={remove_input.value!r}", exc.title, exc.message, True)
            return

        removed_name = remove_input.value.strip()
        remove_input.value = ""
        self.report(
            f"remove_ok name={removed_name!r} remaining={len(remaining)}",
            NOTIFY_TITLES["removed"],
            NOTIFY_MESSAGES["removed"],
            False,
        )
