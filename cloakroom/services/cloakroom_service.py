from __future__ import annotations

import logging

from cloakroom.core.cloakroom import Cloakroom
from cloakroom.core.entities.items import ItemBundle
from cloakroom.core.entities.key import Key
from cloakroom.core.entities.locker import Locker
from cloakroom.core.repositories.locker_slot_repository import LockerSlotRepository
from cloakroom.infrastructure.config import Settings
from cloakroom.infrastructure.database import create_session_factory
from cloakroom.infrastructure.repositories.in_memory_locker_slot_repository_impl import (
    InMemoryLockerSlotRepositoryImpl,
)
from cloakroom.infrastructure.repositories.sql_locker_slot_repository_impl import SqlLockerSlotRepositoryImpl
from cloakroom.schemas.models import CloakroomParams, ClosedLockerView

logger = logging.getLogger(__name__)


class NoClosedLockersError(LookupError):
    """No keys are held, so there is no locker to open."""


class KeyNotFoundError(LookupError):
    """No key is held for the requested locker number. Ask again."""

    def __init__(self, locker_number: int) -> None:
        super().__init__(f"key for locker number {locker_number} not found")
        self.locker_number = locker_number


def _build_slot_repo(settings: Settings) -> LockerSlotRepository:
    if settings.slot_store == "memory":
        return InMemoryLockerSlotRepositoryImpl()

    session_factory = create_session_factory(settings.database_url)
    repo = SqlLockerSlotRepositoryImpl(session_factory())
    # Lockers start out free on every run, even against a file-backed database.
    repo.reset()
    return repo


def build_cloakroom(settings: Settings, params: CloakroomParams) -> Cloakroom:
    slot_repo = _build_slot_repo(settings)
    logger.info(
        "Created cloakroom with %d lockers of %d items (%s slot store)",
        params.num_lockers,
        params.max_items_per_locker,
        settings.slot_store,
    )
    return Cloakroom(params.num_lockers, params.max_items_per_locker, slot_repo=slot_repo)


class CloakroomSession:
    """
    A cloakroom together with the keys its customers are holding.

    Keys are kept by locker number so a customer can name the number printed on
    their key instead of handing over the Key object.
    """

    def __init__(self, cloakroom: Cloakroom) -> None:
        self._cloakroom = cloakroom
        self._keys: dict[int, Key] = {}

    @property
    def cloakroom(self) -> Cloakroom:
        return self._cloakroom

    @property
    def has_keys(self) -> bool:
        return bool(self._keys)

    def start_deposit(self) -> Locker | None:
        """Check out a free locker, or return None when every locker is taken."""
        return self._cloakroom.find_free_locker().locker

    def close(self, locker: Locker) -> int:
        """Close the locker and keep its key. Returns the locker number."""
        locker_number = locker.locker_number
        self._keys[locker_number] = self._cloakroom.close_locker(locker)
        return locker_number

    def reopen(self, locker_number: int) -> Locker:
        """Open a closed locker using the held key for `locker_number`."""
        if not self._keys:
            raise NoClosedLockersError("there are no closed lockers from which to collect items")

        key = self._keys.pop(locker_number, None)
        if key is None:
            raise KeyNotFoundError(locker_number)

        return self._cloakroom.open_locker(key)

    def vacate(self, locker: Locker) -> ItemBundle:
        return self._cloakroom.vacate_locker(locker)

    def collect(self, locker_number: int) -> ItemBundle:
        """Open the locker for `locker_number` and take everything out of it."""
        return self.vacate(self.reopen(locker_number))

    def closed_lockers(self) -> list[ClosedLockerView]:
        return [
            ClosedLockerView(locker_number=number, contents=items.format())
            for number, items in self._cloakroom.closed_lockers()
        ]
