from __future__ import annotations

from pydantic import BaseModel, Field

MIN_VALID_NUM_LOCKERS = 1
MAX_VALID_NUM_LOCKERS = 1000

MIN_VALID_MAX_ITEMS = 5
MAX_VALID_MAX_ITEMS = 15

MIN_VALID_ITEM_COUNT = 0
MAX_VALID_ITEM_COUNT = 255


class CloakroomParams(BaseModel):
    num_lockers: int = Field(ge=MIN_VALID_NUM_LOCKERS, le=MAX_VALID_NUM_LOCKERS)
    max_items_per_locker: int = Field(ge=MIN_VALID_MAX_ITEMS, le=MAX_VALID_MAX_ITEMS)


class ItemCountInput(BaseModel):
    num_items: int = Field(ge=MIN_VALID_ITEM_COUNT, le=MAX_VALID_ITEM_COUNT)


class ClosedLockerView(BaseModel):
    locker_number: int
    contents: str
