from __future__ import annotations

from typing import Any


class HandleConsumedError(RuntimeError):
    """Raised when a locker or key is used after it was handed back to the cloakroom."""


class ForeignHandleError(ValueError):
    """Raised when a locker or key is handed to a cloakroom that did not issue it."""


class Handle:
    """
    Base for values a cloakroom hands out and later takes back.

    Handles are single-use: once the cloakroom takes one back it is marked consumed
    and every further use raises HandleConsumedError. Handles cannot be constructed,
    copied or pickled; the cloakroom issues them through `_issue`.
    """

    __slots__ = ("_owner", "_consumed")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} objects are only issued by a Cloakroom")

    @classmethod
    def _new(cls, owner: object):
        handle = cls.__new__(cls)
        handle._owner = owner
        handle._consumed = False
        return handle

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects are only issued by a Cloakroom")

    def __deepcopy__(self, memo: dict[int, Any]):
        raise TypeError(f"{type(self).__name__} objects are only issued by a Cloakroom")

    def __reduce_ex__(self, protocol: int):
        raise TypeError(f"{type(self).__name__} objects are only issued by a Cloakroom")

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_live(self) -> None:
        if self._consumed:
            raise HandleConsumedError(f"{self!r} has already been handed back to the cloakroom")

    def _check_returnable_to(self, owner: object) -> None:
        """Raise unless `owner` may take this handle back."""
        if self._owner is not owner:
            raise ForeignHandleError(f"{self!r} was issued by a different cloakroom")
        self._ensure_live()

    def _consume(self) -> None:
        self._consumed = True
