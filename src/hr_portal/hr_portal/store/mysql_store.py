from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, like_prefix, storage_errors
from .codec import decode, encode
from .repository import Mutator, RecordStore


class MySQLRecordStore(RecordStore):
    """Key-value records in one InnoDB table.

    ``update`` locks the row with SELECT ... FOR UPDATE so read-modify-write on a
    key is serialized across processes.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[dict]:
        with storage_errors("get"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM records WHERE record_key=%s", (key,))
                r = fetchone(cur)
        if not r:
            return None
        return decode(key, r["payload"])

    def put(self, key: str, value: dict) -> None:
        raw = encode(key, value)
        with storage_errors("put"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO records(record_key, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, raw),
                )

    def update(self, key: str, mutate: Mutator) -> dict:
        with storage_errors("update"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT payload FROM records WHERE record_key=%s FOR UPDATE", (key,))
                r = fetchone(cur)
                current = decode(key, r["payload"]) if r else None

                new_value = mutate(current)
                raw = encode(key, new_value)
                cur.execute(
                    """
                    INSERT INTO records(record_key, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, raw),
                )
        return decode(key, raw)

    def scan(self, prefix: str) -> Iterator[Tuple[str, dict]]:
        with storage_errors("scan"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT record_key, payload FROM records WHERE record_key LIKE %s ORDER BY record_key",
                    (like_prefix(prefix),),
                )
                rows = fetchall(cur)
        for r in rows:
            yield r["record_key"], decode(r["record_key"], r["payload"])

    def next_sequence(self, name: str) -> int:
        with storage_errors("next_sequence"):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO record_sequences(name, seq)
                    VALUES(%s, LAST_INSERT_ID(1))
                    ON DUPLICATE KEY UPDATE seq=LAST_INSERT_ID(seq + 1)
                    """,
                    (name,),
                )
                cur.execute("SELECT LAST_INSERT_ID() AS seq")
                r = fetchone(cur)
        return int(r["seq"])
