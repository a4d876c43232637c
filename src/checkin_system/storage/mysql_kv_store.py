from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection
from .kv_store import KeyValueStore
from .mysql_base import db_cursor, fetchone

KV_TABLE = "checkin_kv"


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection, *, table: str = KV_TABLE):
        self._conn_factory = conn_factory
        self._table = table

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"SELECT store_value FROM {self._table} WHERE store_key=%s",
                    (key,),
                )
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot read key {key!r}: {e}") from e
        return row["store_value"] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO {self._table}(store_key, store_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                    """,
                    (key, value),
                )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot write key {key!r}: {e}") from e
