#!/usr/bin/env python3
"""
Database initialization script.

This script handles store setup including:
- Checking connectivity of the relational database
- Creating all tables from the SQLAlchemy models
- Seeding initial data if needed (both storage backends)

Idempotent: safe to run multiple times.

Usage:
    python -m src.core.init_db
"""

import asyncio
import sys

from src.core.config import settings
from src.core.container import ensure_initial_data, get_database, get_logger
from src.core.enums import StorageBackend
from src.infrastructure.persistence.database import Database


async def prepare_relational_store(db: Database) -> None:
    """Check connectivity and create missing tables.

    Table creation only creates tables that don't already exist.

    Args:
        db: Database manager.

    Raises:
        ConnectionError: If the database is unreachable.
    """
    logger = get_logger()

    if not await db.check_connection():
        raise ConnectionError("Database connection failed")
    logger.info("database_connected")

    await db.create_all()
    logger.info("database_tables_ready")


async def init_db() -> None:
    """Initialize the configured store and seed it.

    This is the main entry point that orchestrates all initialization steps.
    Each failure is logged once, where it happens: store preparation here,
    seeding inside ensure_initial_data().
    """
    logger = get_logger()
    logger.info(
        "database_initialization_started",
        storage_backend=settings.storage_backend.value,
    )

    db = get_database()
    try:
        if settings.storage_backend == StorageBackend.RELATIONAL:
            try:
                await prepare_relational_store(db)
            except Exception as e:
                logger.error("database_preparation_failed", error=e)
                raise

        report = await ensure_initial_data()
        logger.info(
            "database_initialization_completed",
            seeded_anything=report.seeded_anything,
        )
    finally:
        await db.close()


def run_init() -> None:
    """Synchronous wrapper for async init_db.

    This allows the script to be run directly or imported and called.
    Exits with status 1 on failure.
    """
    try:
        asyncio.run(init_db())
    except KeyboardInterrupt:
        get_logger().info("database_initialization_interrupted")
        sys.exit(1)
    except Exception:
        # Logged by init_db() or ensure_initial_data()
        sys.exit(1)


if __name__ == "__main__":
    run_init()
