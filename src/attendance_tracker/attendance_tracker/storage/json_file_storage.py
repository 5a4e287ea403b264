from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .repository import SlotStorage

logger = logging.getLogger(__name__)


class JsonFileSlotStorage(SlotStorage):
    """One ``<slot>.json`` file per slot inside ``directory``."""

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def read_slot(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            logger.debug("Slot %s not found at %s", key, path)
            return None
        return path.read_text(encoding="utf-8")

    def write_slot(self, key: str, payload: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(path)
        logger.debug("Slot %s written to %s (%d bytes)", key, path, len(payload))
