#!/usr/bin/env python3
"""Create the comment tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from leaf.config import Settings
from leaf.persistence.database import create_engine, create_tables
from leaf.util.logging import setup_logging
from leaf.util.observability import configure_logfire


async def _init_db(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create missing tables and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Creating database tables")
        asyncio.run(_init_db(settings))
        logfire.info("Database tables ready")
        return 0

    except Exception as e:
        logfire.error(
            "Database initialization failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container doesn't start without a schema
        raise


if __name__ == "__main__":
    sys.exit(main())
