from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from cloakroom.core.entities.items import ItemBundle
from cloakroom.core.entities.slot import Closed, ContentsBeingChanged, SlotRecord, SlotStatus
from cloakroom.core.repositories.locker_slot_repository import LockerSlotRepository
from cloakroom.infrastructure.models.models import LockerSlotModel


class SqlLockerSlotRepositoryImpl(LockerSlotRepository):
    """
    SQLAlchemy implementation of the in-use table.

    Closed slots keep their item counts in the row; checked-out slots keep none.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, locker_number: int) -> SlotRecord | None:
        row = self._db.get(LockerSlotModel, locker_number)
        if row is None:
            return None
        return self._to_record(row)

    def put(self, locker_number: int, record: SlotRecord) -> None:
        row = self._db.get(LockerSlotModel, locker_number)
        if row is None:
            row = LockerSlotModel(locker_number=locker_number)

        row.status = record.status
        if isinstance(record, Closed):
            row.coats = record.items.coats
            row.backpacks = record.items.backpacks
            row.umbrellas = record.items.umbrellas
            row.other = record.items.other
        else:
            row.coats = row.backpacks = row.umbrellas = row.other = None

        self._db.add(row)
        self._commit()

    def remove(self, locker_number: int) -> SlotRecord | None:
        row = self._db.get(LockerSlotModel, locker_number)
        if row is None:
            return None

        record = self._to_record(row)
        self._db.delete(row)
        self._commit()
        return record

    def in_use(self) -> dict[int, SlotRecord]:
        rows = self._db.scalars(select(LockerSlotModel)).all()
        return {row.locker_number: self._to_record(row) for row in rows}

    def reset(self) -> None:
        """Free every locker."""
        self._db.execute(delete(LockerSlotModel))
        self._commit()

    def _commit(self) -> None:
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

    @staticmethod
    def _to_record(row: LockerSlotModel) -> SlotRecord:
        status = SlotStatus(row.status) if not isinstance(row.status, SlotStatus) else row.status
        if status is SlotStatus.CLOSED:
            return Closed(
                items=ItemBundle(
                    coats=row.coats,
                    backpacks=row.backpacks,
                    umbrellas=row.umbrellas,
                    other=row.other,
                )
            )
        return ContentsBeingChanged()
