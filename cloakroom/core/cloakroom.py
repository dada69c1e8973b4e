from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NoReturn

from cloakroom.core.entities.items import ItemBundle
from cloakroom.core.entities.key import Key
from cloakroom.core.entities.locker import Locker
from cloakroom.core.entities.slot import Closed, ContentsBeingChanged, Free, LockerState, NonExistent
from cloakroom.core.repositories.locker_slot_repository import LockerSlotRepository

logger = logging.getLogger(__name__)


class InternalInconsistencyError(RuntimeError):
    """
    A live Key pointed at a slot that is not Closed.

    Not reachable through the public API; indicates a defect in keeping keys and
    slot records in step. Report it, do not retry.
    """

    def __init__(self, message: str, *, locker_number: int) -> None:
        super().__init__(message)
        self.locker_number = locker_number


@dataclass(frozen=True, slots=True)
class FreeLockerResult:
    """Outcome of `Cloakroom.find_free_locker`; `locker` is None when every locker is taken."""
    locker: Locker | None

    @property
    def found(self) -> bool:
        return self.locker is not None


class Cloakroom:
    """
    A fixed bank of lockers numbered 1..num_lockers, each holding up to
    max_items_per_locker items.

    A customer can:
      - find a free locker and fill it
      - close the locker, taking away a key
      - open the locker again with the key
      - vacate an open locker, taking its contents and freeing it

    Lockers and keys are handed over, not shared: close_locker and vacate_locker
    take the Locker back, open_locker takes the Key back, and the handed-back
    object cannot be used again.
    """

    def __init__(self, num_lockers: int, max_items_per_locker: int, *, slot_repo: LockerSlotRepository) -> None:
        if num_lockers < 0:
            raise ValueError(f"num_lockers must not be negative, got {num_lockers}")
        if max_items_per_locker < 0:
            raise ValueError(f"max_items_per_locker must not be negative, got {max_items_per_locker}")

        self._num_lockers = num_lockers
        self._max_items_per_locker = max_items_per_locker
        self._slot_repo = slot_repo

    def get_num_lockers(self) -> int:
        return self._num_lockers

    def get_max_items_per_locker(self) -> int:
        return self._max_items_per_locker

    def find_free_locker(self) -> FreeLockerResult:
        """Check out the lowest-numbered free locker, if there is one."""
        in_use = self._slot_repo.in_use()
        if len(in_use) >= self._num_lockers:
            return FreeLockerResult(locker=None)

        locker_number = next(
            (n for n in range(1, self._num_lockers + 1) if n not in in_use),
            None,
        )
        if locker_number is None:
            return FreeLockerResult(locker=None)

        self._slot_repo.put(locker_number, ContentsBeingChanged())
        logger.debug("Locker %d checked out", locker_number)

        return FreeLockerResult(locker=self._issue_locker(locker_number, ItemBundle()))

    def close_locker(self, locker: Locker) -> Key:
        locker._check_returnable_to(self)
        locker_number = locker._number

        self._slot_repo.put(locker_number, Closed(items=locker._take_items()))
        locker._consume()
        logger.debug("Locker %d closed", locker_number)

        return Key._issue(self, locker_number)

    def open_locker(self, key: Key) -> Locker:
        key._check_returnable_to(self)
        locker_number = key._locker_number

        record = self._slot_repo.get(locker_number)
        if record is None:
            key._consume()
            self._report_inconsistency(
                f"unexpectedly failed to find record for locker number {locker_number}",
                locker_number,
            )
        if not isinstance(record, Closed):
            key._consume()
            self._report_inconsistency(
                f"record for locker number {locker_number} unexpectedly contains no data",
                locker_number,
            )

        self._slot_repo.put(locker_number, ContentsBeingChanged())
        key._consume()
        logger.debug("Locker %d opened", locker_number)

        return self._issue_locker(locker_number, record.items)

    def vacate_locker(self, locker: Locker) -> ItemBundle:
        """
        Remove all items from a locker and leave it free for the next customer.
        """
        locker._check_returnable_to(self)
        locker_number = locker._number

        self._slot_repo.remove(locker_number)
        locker._consume()
        logger.debug("Locker %d vacated", locker_number)

        return locker._take_items()

    def get_locker_state(self, locker_number: int) -> LockerState:
        if locker_number < 1 or locker_number > self._num_lockers:
            return NonExistent()

        record = self._slot_repo.get(locker_number)
        if record is None:
            return Free()
        return record

    def closed_lockers(self) -> Iterator[tuple[int, ItemBundle]]:
        """Yield (locker number, contents) for every closed locker, lowest number first."""
        in_use = self._slot_repo.in_use()
        for locker_number in sorted(in_use):
            record = in_use[locker_number]
            if isinstance(record, Closed):
                yield locker_number, record.items

    def _issue_locker(self, locker_number: int, items: ItemBundle) -> Locker:
        return Locker._issue(
            self,
            number=locker_number,
            max_items=self._max_items_per_locker,
            items=items,
        )

    @staticmethod
    def _report_inconsistency(message: str, locker_number: int) -> NoReturn:
        logger.error("Cloakroom inconsistency: %s", message)
        raise InternalInconsistencyError(message, locker_number=locker_number)
