from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SlotStorage


class MySQLSlotStorage(SlotStorage):
    """Slots kept as rows of the ``app_state`` table."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def read_slot(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payload
                FROM app_state
                WHERE slot_key=%s
                """,
                (key,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return row["payload"]

    def write_slot(self, key: str, payload: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO app_state(slot_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, payload),
            )
