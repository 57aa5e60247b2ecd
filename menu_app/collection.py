"""In-memory menu collection: validated mutations and derived views."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterator
from uuid import uuid4

from menu_app.config import MAX_PRICE_DIGITS
from menu_app.constant import BLANK_NAME, INVALID_PRICE, MISSING_FIELD, NOT_FOUND, NOTIFY_MESSAGES, NOTIFY_TITLES
from menu_app.errors import NotFoundError, ValidationError
from menu_app.models import Course, MenuItem


def _validation_error(reason: str) -> ValidationError:
    return ValidationError(reason, NOTIFY_TITLES[reason], NOTIFY_MESSAGES[reason])


def parse_price(raw: str) -> Decimal:
    """Parse raw price text into a finite, non-negative Decimal."""
    try:
        price = Decimal(raw.strip())
    except InvalidOperation:
        raise _validation_error(INVALID_PRICE) from None
    if not price.is_finite() or price < 0 or price.adjusted() >= MAX_PRICE_DIGITS:
        raise _validation_error(INVALID_PRICE)
    # Folds "-0" into 0.
    return abs(price)


class MenuCollection:
    """Ordered collection of menu items owned by the running app.

    Insertion order is the natural order. The sort operations reorder the
    collection in place and are stable, so items with equal keys keep their
    relative order.
    """

    def __init__(self) -> None:
        self._items: list[MenuItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(tuple(self._items))

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items)

    def add(self, name: str, description: str, course: Course | str, price: str) -> MenuItem:
        """Validate raw form values and append a new item.

        Blank fields are reported before a bad price. Nothing is appended
        when validation fails.
        """
        name = name.strip()
        description = description.strip()
        if not name or not description or not price.strip():
            raise _validation_error(MISSING_FIELD)
        parsed_price = parse_price(price)
        item = MenuItem(
            id=uuid4().hex,
            name=name,
            description=description,
            course=Course.parse(course),
            price=parsed_price,
        )
        self._items.append(item)
        return item

    def find(self, name: str) -> MenuItem | None:
        """Return the first item whose name matches, ignoring case."""
        key = name.strip().casefold()
        for item in self._items:
            if item.name.casefold() == key:
                return item
        return None

    def remove(self, name: str) -> tuple[MenuItem, ...]:
        """Remove the first item matching ``name`` and return the remaining items."""
        if not name.strip():
            raise _validation_error(BLANK_NAME)
        target = self.find(name)
        if target is None:
            raise NotFoundError(NOT_FOUND, NOTIFY_TITLES[NOT_FOUND], NOTIFY_MESSAGES[NOT_FOUND])
        # Identity match so a duplicate name further down stays put.
        idx = next(i for i, item in enumerate(self._items) if item is target)
        del self._items[idx]
        return self.items

    def averages_by_course(self) -> dict[Course, Decimal]:
        """Mean price per course; a course without items averages to 0."""
        averages: dict[Course, Decimal] = {}
        for course in Course:
            prices = [item.price for item in self._items if item.course is course]
            averages[course] = sum(prices, Decimal(0)) / len(prices) if prices else Decimal(0)
        return averages

    def sort_by_course(self) -> tuple[MenuItem, ...]:
        """Order alphabetically by course label: Dessert, Main, Starter."""
        self._items.sort(key=lambda item: item.course.value)
        return self.items

    def sort_by_price(self) -> tuple[MenuItem, ...]:
        self._items.sort(key=lambda item: item.price)
        return self.items
