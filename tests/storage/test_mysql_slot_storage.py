from __future__ import annotations

from attendance_tracker.core.constants import EMPLOYEES_SLOT
from attendance_tracker.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from attendance_tracker.database.connection import DatabaseConnection, DBConfig
from attendance_tracker.storage.mysql_slot_storage import MySQLSlotStorage
from attendance_tracker.storage.store import AttendanceStore


class FakeCursor:
    def __init__(self, table: dict):
        self._table = table
        self._result = None
        self.closed = False

    def execute(self, sql: str, params=()):
        if sql.strip().upper().startswith("SELECT"):
            payload = self._table.get(params[0])
            self._result = {"payload": payload} if payload is not None else None
        else:
            key, payload = params
            self._table[key] = payload

    def fetchone(self):
        return self._result

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, table: dict):
        self._table = table
        self.committed = 0
        self.rolled_back = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self._table)

    def commit(self):
        self.committed += 1

    def rollback(self):
        self.rolled_back += 1

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict[str, str] = {}
        self.connections: list[FakeConnection] = []

    def connect(self):
        conn = FakeConnection(self.table)
        self.connections.append(conn)
        return conn


def test_read_missing_slot_returns_none():
    storage = MySQLSlotStorage(FakeConnFactory())

    assert storage.read_slot(EMPLOYEES_SLOT) is None


def test_write_then_read_slot_commits():
    factory = FakeConnFactory()
    storage = MySQLSlotStorage(factory)

    storage.write_slot(EMPLOYEES_SLOT, "[]")
    storage.write_slot(EMPLOYEES_SLOT, '[{"id": 1, "name": "A", "position": "B", "department": "C", "joinDate": "2024-01-01"}]')

    assert factory.connections[0].committed == 1
    store = AttendanceStore(storage).load()
    assert [e.name for e in store.employees] == ["A"]


def test_schema_script_is_split_into_statements():
    sql = _strip_create_db_and_use(
        "CREATE DATABASE IF NOT EXISTS attendance_db;\n"
        "USE attendance_db;\n"
        "CREATE TABLE a (x VARCHAR(8) DEFAULT ';');\n"
        "INSERT INTO a VALUES ('it''s');"
    )

    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (x VARCHAR(8) DEFAULT ';')",
        "INSERT INTO a VALUES ('it''s')",
    ]


def test_connection_factory_is_shared_per_config():
    first = DBConfig.from_mapping({"host": "db-a", "user": "u", "password": "p", "database": "one"})
    second = DBConfig.from_mapping({"host": "db-b", "user": "u", "password": "p", "database": "two"})

    assert DatabaseConnection.get_instance(first) is DatabaseConnection.get_instance(DBConfig.from_mapping(
        {"host": "db-a", "user": "u", "password": "p", "database": "one"}
    ))
    assert DatabaseConnection.get_instance(second) is not DatabaseConnection.get_instance(first)
