from __future__ import annotations

from sqlalchemy import CheckConstraint, Enum, Integer
from sqlalchemy.orm import Mapped, mapped_column

from cloakroom.core.entities.slot import SlotStatus
from cloakroom.infrastructure.database import Base


class LockerSlotModel(Base):
    """One row per locker that is not free."""

    __tablename__ = "locker_slots"
    __table_args__ = (
        CheckConstraint(
            "status != 'CLOSED' OR (coats IS NOT NULL AND backpacks IS NOT NULL "
            "AND umbrellas IS NOT NULL AND other IS NOT NULL)",
            name="closed_slot_has_items",
        ),
    )

    locker_number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    status: Mapped[SlotStatus] = mapped_column(Enum(SlotStatus), nullable=False)
    coats: Mapped[int | None] = mapped_column(Integer, nullable=True)
    backpacks: Mapped[int | None] = mapped_column(Integer, nullable=True)
    umbrellas: Mapped[int | None] = mapped_column(Integer, nullable=True)
    other: Mapped[int | None] = mapped_column(Integer, nullable=True)
