"""Domain models for the course menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from menu_app.constant import INVALID_COURSE, NOTIFY_MESSAGES, NOTIFY_TITLES
from menu_app.errors import ValidationError


class Course(str, Enum):
    """Fixed category of a menu item."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"

    @classmethod
    def parse(cls, value: Course | str) -> Course:
        """Resolve a course from its label, ignoring case and surrounding spaces."""
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        for course in cls:
            if course.value.lower() == label:
                return course
        raise ValidationError(INVALID_COURSE, NOTIFY_TITLES[INVALID_COURSE], NOTIFY_MESSAGES[INVALID_COURSE])


@dataclass(frozen=True)
class MenuItem:
    """A single priced, described dish belonging to one course."""

    id: str
    name: str
    description: str
    course: Course
    price: Decimal
