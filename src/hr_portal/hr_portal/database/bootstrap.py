from __future__ import annotations

import logging

from .connection import DBConfig, DatabaseConnection
from .mysql_base import storage_errors

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS records (
        record_key VARCHAR(191) NOT NULL,
        payload LONGTEXT NOT NULL,
        updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
        PRIMARY KEY (record_key)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
    """,
    """
    CREATE TABLE IF NOT EXISTS record_sequences (
        name VARCHAR(64) NOT NULL,
        seq BIGINT NOT NULL,
        PRIMARY KEY (name)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_unicode_ci
    """,
)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_settings(db_config)
    with storage_errors("create database"):
        conn = DatabaseConnection(target).connect(with_database=False)
        try:
            cur = conn.cursor()
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
            conn.commit()
        finally:
            conn.close()


def apply_schema(db_config: dict) -> None:
    """Create the key-value tables (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(db_config)
    target = DBConfig.from_settings(db_config)

    with storage_errors("apply schema"):
        conn = DatabaseConnection(target).connect()
        try:
            cur = conn.cursor()
            for stmt in SCHEMA_STATEMENTS:
                cur.execute(stmt)
            conn.commit()
        finally:
            conn.close()
    logger.info("schema_applied", extra={"database": target.database, "host": target.host})


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_settings(db_config)
    with storage_errors("list tables"):
        conn = DatabaseConnection(target).connect()
        try:
            cur = conn.cursor()
            cur.execute("SHOW TABLES")
            return [row[0] for row in cur.fetchall()]
        finally:
            conn.close()
