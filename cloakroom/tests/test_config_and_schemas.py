from __future__ import annotations

import pytest
from pydantic import ValidationError

from cloakroom.infrastructure.config import Settings
from cloakroom.schemas.models import CloakroomParams, ItemCountInput


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DATABASE_URL", "SLOT_STORE", "NUM_LOCKERS", "MAX_ITEMS_PER_LOCKER", "LOG_LEVEL"):
        monkeypatch.delenv(f"CLOAKROOM_{name}", raising=False)

    settings = Settings()

    assert settings.database_url == "sqlite+pysqlite:///:memory:"
    assert settings.slot_store == "sqlite"
    assert settings.num_lockers is None
    assert settings.max_items_per_locker is None
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLOAKROOM_NUM_LOCKERS", "12")
    monkeypatch.setenv("CLOAKROOM_MAX_ITEMS_PER_LOCKER", "9")
    monkeypatch.setenv("CLOAKROOM_SLOT_STORE", "memory")

    settings = Settings()

    assert settings.num_lockers == 12
    assert settings.max_items_per_locker == 9
    assert settings.slot_store == "memory"


def test_settings_reject_unknown_slot_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLOAKROOM_SLOT_STORE", "redis")

    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize(("num_lockers", "max_items"), [(1, 5), (1000, 15), (20, 8)])
def test_cloakroom_params_in_range(num_lockers: int, max_items: int) -> None:
    params = CloakroomParams(num_lockers=num_lockers, max_items_per_locker=max_items)

    assert params.num_lockers == num_lockers
    assert params.max_items_per_locker == max_items


@pytest.mark.parametrize(("num_lockers", "max_items"), [(0, 5), (1001, 5), (10, 4), (10, 16)])
def test_cloakroom_params_out_of_range(num_lockers: int, max_items: int) -> None:
    with pytest.raises(ValidationError):
        CloakroomParams(num_lockers=num_lockers, max_items_per_locker=max_items)


@pytest.mark.parametrize("num_items", [-1, 256])
def test_item_count_out_of_range(num_items: int) -> None:
    with pytest.raises(ValidationError):
        ItemCountInput(num_items=num_items)
