from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cloakroom.core.entities.items import ItemBundle


class SlotStatus(str, Enum):
    CONTENTS_BEING_CHANGED = "CONTENTS_BEING_CHANGED"
    CLOSED = "CLOSED"


@dataclass(frozen=True, slots=True)
class Free:
    """No record in the in-use table: the locker can be handed out."""


@dataclass(frozen=True, slots=True)
class NonExistent:
    """The number is outside 1..num_lockers."""


@dataclass(frozen=True, slots=True)
class ContentsBeingChanged:
    """Checked out: the contents travel with the Locker the caller holds."""

    status = SlotStatus.CONTENTS_BEING_CHANGED


@dataclass(frozen=True, slots=True)
class Closed:
    """Contents held by the cloakroom; a Key for this number is outstanding."""

    items: ItemBundle

    status = SlotStatus.CLOSED


# What the in-use table stores for a locker number.
SlotRecord = ContentsBeingChanged | Closed

# What `Cloakroom.get_locker_state` reports.
LockerState = Free | ContentsBeingChanged | Closed | NonExistent
