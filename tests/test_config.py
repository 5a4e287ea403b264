from __future__ import annotations

import importlib

import pytest

from attendance_tracker.container import build_storage
from attendance_tracker.storage.json_file_storage import JsonFileSlotStorage
from attendance_tracker.storage.memory_storage import MemorySlotStorage
from attendance_tracker.storage.mysql_slot_storage import MySQLSlotStorage
from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("Testing", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_testing_settings_use_memory_storage():
    settings = importlib.import_module("config.testing")

    assert isinstance(build_storage(settings), MemorySlotStorage)


class _Settings:
    def __init__(self, **values):
        self.__dict__.update(values)


def test_build_storage_backends(tmp_path):
    assert isinstance(build_storage(_Settings(STORAGE_BACKEND="json", STORAGE_DIR=str(tmp_path))), JsonFileSlotStorage)
    mysql_settings = _Settings(STORAGE_BACKEND="MySQL", DB_CONFIG={"host": "db", "user": "u", "password": "p", "database": "d"})
    assert isinstance(build_storage(mysql_settings), MySQLSlotStorage)

    with pytest.raises(ValueError):
        build_storage(_Settings(STORAGE_BACKEND="redis"))
