from __future__ import annotations

from abc import ABC, abstractmethod

from cloakroom.core.entities.slot import SlotRecord


class LockerSlotRepository(ABC):
    """
    Repository interface for the cloakroom's in-use table.

    A locker number without a record is free.
    """

    @abstractmethod
    def get(self, locker_number: int) -> SlotRecord | None:
        """Return the record for a locker number, or None if the locker is free."""
        raise NotImplementedError

    @abstractmethod
    def put(self, locker_number: int, record: SlotRecord) -> None:
        """Insert or replace the record for a locker number."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, locker_number: int) -> SlotRecord | None:
        """Delete and return the record for a locker number, None if there was none."""
        raise NotImplementedError

    @abstractmethod
    def in_use(self) -> dict[int, SlotRecord]:
        """Snapshot of every record, keyed by locker number."""
        raise NotImplementedError
