"""
Database provisioning, run once per process start.

1. create the target database if missing (best effort)
2. open the pool against it (fatal on failure)
3. create each table if missing (fatal on failure)

Everything is idempotent, so it is safe on every restart.
"""

from __future__ import annotations

import logging

import asyncpg

from core.config import Settings
from core.db import Database
from core.errors import DRIVER_ERRORS, StoreError

logger = logging.getLogger(__name__)

MAINTENANCE_DATABASE = "postgres"

TABLES: tuple[tuple[str, str], ...] = (
    (
        "developers",
        """
        CREATE TABLE IF NOT EXISTS developers (
            id SERIAL PRIMARY KEY,
            name VARCHAR(100) NOT NULL,
            avatar VARCHAR(255),
            done INTEGER DEFAULT 0,
            quick_fix TEXT,
            primary_task TEXT,
            secondary_task TEXT,
            status VARCHAR(20) DEFAULT 'active',
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
        """,
    ),
    (
        "backlog",
        """
        CREATE TABLE IF NOT EXISTS backlog (
            id SERIAL PRIMARY KEY,
            task TEXT NOT NULL,
            priority VARCHAR(20) DEFAULT 'medium',
            estimated_hours INTEGER DEFAULT 0,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
        """,
    ),
    (
        "activity_log",
        """
        CREATE TABLE IF NOT EXISTS activity_log (
            id SERIAL PRIMARY KEY,
            date TIMESTAMPTZ NOT NULL DEFAULT now(),
            name VARCHAR(100) NOT NULL,
            task_type VARCHAR(50),
            task_name TEXT,
            type VARCHAR(20) DEFAULT 'completion'
        )
        """,
    ),
    (
        "chat_threads",
        """
        CREATE TABLE IF NOT EXISTS chat_threads (
            id SERIAL PRIMARY KEY,
            chat_key VARCHAR(100) NOT NULL,
            who VARCHAR(50) NOT NULL,
            msg TEXT NOT NULL,
            timestamp TIMESTAMPTZ NOT NULL DEFAULT now(),
            customer VARCHAR(100)
        )
        """,
    ),
)


class ProvisioningError(RuntimeError):
    pass


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def ensure_database(settings: Settings) -> bool:
    """
    Create `settings.db_name` from the maintenance database.

    Returns True when the database exists afterwards as far as we can tell.
    Failures are logged, never raised: the pool connection that follows is the
    real test.
    """
    try:
        conn = await asyncpg.connect(
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password,
            database=MAINTENANCE_DATABASE,
        )
    except DRIVER_ERRORS as exc:
        logger.warning("database_create_skipped name=%s error=%s", settings.db_name, exc)
        return False

    try:
        await conn.execute(f"CREATE DATABASE {quote_identifier(settings.db_name)}")
    except asyncpg.DuplicateDatabaseError:
        logger.info("database_exists name=%s", settings.db_name)
        return True
    except DRIVER_ERRORS as exc:
        logger.warning("database_create_failed name=%s error=%s", settings.db_name, exc)
        return False
    finally:
        await conn.close()

    logger.info("database_created name=%s", settings.db_name)
    return True


async def ensure_tables(db: Database) -> None:
    for table, ddl in TABLES:
        try:
            await db.execute(ddl)
        except StoreError as exc:
            raise ProvisioningError(f"Failed to create table {table}: {exc.detail}") from exc
        logger.info("table_ready name=%s", table)


async def provision(settings: Settings) -> Database:
    await ensure_database(settings)

    try:
        db = await Database.connect(settings)
    except DRIVER_ERRORS as exc:
        raise ProvisioningError(
            f"Failed to connect to database {settings.db_name} at {settings.db_host}:{settings.db_port}: {exc}"
        ) from exc
    logger.info("database_connected name=%s host=%s", settings.db_name, settings.db_host)

    try:
        await ensure_tables(db)
    except ProvisioningError:
        await db.close()
        raise
    return db
