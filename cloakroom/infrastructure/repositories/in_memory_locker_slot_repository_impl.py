from __future__ import annotations

from cloakroom.core.entities.slot import SlotRecord
from cloakroom.core.repositories.locker_slot_repository import LockerSlotRepository


class InMemoryLockerSlotRepositoryImpl(LockerSlotRepository):
    """Dict-backed in-use table."""

    def __init__(self) -> None:
        self._records: dict[int, SlotRecord] = {}

    def get(self, locker_number: int) -> SlotRecord | None:
        return self._records.get(locker_number)

    def put(self, locker_number: int, record: SlotRecord) -> None:
        self._records[locker_number] = record

    def remove(self, locker_number: int) -> SlotRecord | None:
        return self._records.pop(locker_number, None)

    def in_use(self) -> dict[int, SlotRecord]:
        return dict(self._records)
