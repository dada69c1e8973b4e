from __future__ import annotations

from typing import Callable

import pytest

from cloakroom.core.cloakroom import Cloakroom
from cloakroom.core.repositories.locker_slot_repository import LockerSlotRepository
from cloakroom.infrastructure.database import create_session_factory
from cloakroom.infrastructure.repositories.in_memory_locker_slot_repository_impl import (
    InMemoryLockerSlotRepositoryImpl,
)
from cloakroom.infrastructure.repositories.sql_locker_slot_repository_impl import SqlLockerSlotRepositoryImpl


@pytest.fixture()
def sql_slot_repo() -> SqlLockerSlotRepositoryImpl:
    """A fresh, empty in-memory SQLite database per test."""
    session = create_session_factory("sqlite+pysqlite:///:memory:")()
    try:
        yield SqlLockerSlotRepositoryImpl(session)
    finally:
        session.close()


@pytest.fixture(params=["memory", "sqlite"])
def slot_repo(request: pytest.FixtureRequest) -> LockerSlotRepository:
    """Run core tests against both in-use table implementations."""
    if request.param == "memory":
        return InMemoryLockerSlotRepositoryImpl()
    return request.getfixturevalue("sql_slot_repo")


@pytest.fixture()
def make_cloakroom(slot_repo: LockerSlotRepository) -> Callable[[int, int], Cloakroom]:
    def _make(num_lockers: int, max_items_per_locker: int) -> Cloakroom:
        return Cloakroom(num_lockers, max_items_per_locker, slot_repo=slot_repo)

    return _make
