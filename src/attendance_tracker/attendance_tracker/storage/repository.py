from __future__ import annotations

from typing import Optional, Protocol


class SlotStorage(Protocol):
    """Named key-value slots holding serialized collections.

    Note (DIP): the store depends on this interface, not on a concrete backend.
    """

    def read_slot(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write_slot(self, key: str, payload: str) -> None:
        raise NotImplementedError
