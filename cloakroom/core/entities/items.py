from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum


class ItemCategory(str, Enum):
    COATS = "coats"
    BACKPACKS = "backpacks"
    UMBRELLAS = "umbrellas"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ItemBundle:
    """
    Counts of the items stored in one locker.

    Each count is only bounded by the capacity of the locker holding the bundle.
    The string form is stable and shown to customers:

        num coats: C, num backpacks: B, num umbrellas: U, num other items: O
    """
    coats: int = 0
    backpacks: int = 0
    umbrellas: int = 0
    other: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{f.name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{f.name} must not be negative, got {value}")

    def total(self) -> int:
        return self.coats + self.backpacks + self.umbrellas + self.other

    def count(self, category: ItemCategory) -> int:
        return getattr(self, ItemCategory(category).value)

    def with_count(self, category: ItemCategory, num_items: int) -> ItemBundle:
        """Return a copy with one category replaced."""
        return replace(self, **{ItemCategory(category).value: num_items})

    def format(self) -> str:
        return (
            f"num coats: {self.coats}, "
            f"num backpacks: {self.backpacks}, "
            f"num umbrellas: {self.umbrellas}, "
            f"num other items: {self.other}"
        )

    def __str__(self) -> str:
        return self.format()
