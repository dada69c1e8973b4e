from __future__ import annotations

from cloakroom.core.entities.handle import Handle
from cloakroom.core.entities.items import ItemBundle, ItemCategory


class CapacityExceededError(ValueError):
    """Raised when a change would take a locker past its capacity. The locker is left unchanged."""

    def __init__(self, *, locker_number: int, requested_total: int, max_items: int) -> None:
        super().__init__(
            f"locker {locker_number} holds at most {max_items} items, "
            f"change would bring it to {requested_total}"
        )
        self.locker_number = locker_number
        self.requested_total = requested_total
        self.max_items = max_items


class Locker(Handle):
    """
    A locker checked out of the cloakroom.

    The caller owns the locker until it is handed back with `Cloakroom.close_locker`
    or `Cloakroom.vacate_locker`. Every change keeps `total_items <= max_items`.
    """

    __slots__ = ("_number", "_max_items", "_items")

    @classmethod
    def _issue(cls, owner: object, *, number: int, max_items: int, items: ItemBundle) -> Locker:
        locker = cls._new(owner)
        locker._number = number
        locker._max_items = max_items
        locker._items = items
        return locker

    @property
    def locker_number(self) -> int:
        self._ensure_live()
        return self._number

    @property
    def max_items(self) -> int:
        self._ensure_live()
        return self._max_items

    @property
    def items(self) -> ItemBundle:
        self._ensure_live()
        return self._items

    @property
    def total_items(self) -> int:
        return self.items.total()

    def set_count(self, category: ItemCategory, num_items: int) -> None:
        self._ensure_live()
        if isinstance(num_items, bool) or not isinstance(num_items, int):
            raise ValueError(f"number of items must be an int, got {num_items!r}")
        if num_items < 0:
            raise ValueError(f"number of items must not be negative, got {num_items}")

        current = self._items.count(category)
        requested_total = self._items.total() - current + num_items
        if requested_total > self._max_items:
            raise CapacityExceededError(
                locker_number=self._number,
                requested_total=requested_total,
                max_items=self._max_items,
            )
        self._items = self._items.with_count(category, num_items)

    def set_coats(self, num_items: int) -> None:
        self.set_count(ItemCategory.COATS, num_items)

    def set_backpacks(self, num_items: int) -> None:
        self.set_count(ItemCategory.BACKPACKS, num_items)

    def set_umbrellas(self, num_items: int) -> None:
        self.set_count(ItemCategory.UMBRELLAS, num_items)

    def set_other(self, num_items: int) -> None:
        self.set_count(ItemCategory.OTHER, num_items)

    def _take_items(self) -> ItemBundle:
        return self._items

    def __repr__(self) -> str:
        state = ", consumed" if self._consumed else ""
        return f"Locker(number={self._number}, max_items={self._max_items}, items={self._items}{state})"
