from __future__ import annotations

from typing import Optional

from .repository import SlotStorage


class MemorySlotStorage(SlotStorage):
    """Process-local slots (tests and the testing config)."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._slots: dict[str, str] = dict(initial or {})

    def read_slot(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def write_slot(self, key: str, payload: str) -> None:
        self._slots[key] = payload
