"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, ideaforge.configs
System role: Database schema initialization

Usage:
    python -m ideaforge.boundary.db.create_tables
"""

import asyncio
import logging

from ideaforge.boundary.db.base import Base
from ideaforge.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from ideaforge.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: CREATE TABLE IF NOT EXISTS for each model.

    Raises:
        SQLAlchemyError: If database connection or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped")


if __name__ == "__main__":
    from ideaforge.observability.logger import configure_logging

    configure_logging()
    asyncio.run(create_all_tables())
