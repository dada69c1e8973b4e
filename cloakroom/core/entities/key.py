from __future__ import annotations

from cloakroom.core.entities.handle import Handle


class Key(Handle):
    """Token returned when a locker is closed; the only way to open it again."""

    __slots__ = ("_locker_number",)

    @classmethod
    def _issue(cls, owner: object, locker_number: int) -> Key:
        key = cls._new(owner)
        key._locker_number = locker_number
        return key

    @property
    def locker_number(self) -> int:
        self._ensure_live()
        return self._locker_number

    def __repr__(self) -> str:
        state = ", consumed" if self._consumed else ""
        return f"Key(locker_number={self._locker_number}{state})"
