"""
Embedding backfill command.

Usage:
    python -m newsbot.scripts.backfill_embeddings
    python -m newsbot.scripts.backfill_embeddings --delay 1.0

Purpose:
- Ensure the schema exists
- Embed every article that has no vector yet
- Print processed and failed counts

Dependencies: newsbot.application.services.backfill_service, newsbot.api.deps
System role: Offline job for populating article embeddings
"""

import asyncio
import logging
import sys

from newsbot.api.deps.dependencies import get_service_cache
from newsbot.application.services.backfill_service import BackfillService, BackfillSummary
from newsbot.boundary.db import create_all_tables, get_async_engine
from newsbot.configs import get_settings
from newsbot.core.exceptions import NewsBotException
from newsbot.observability import configure_logging

logger = logging.getLogger(__name__)


async def run_backfill(delay_seconds: float | None = None) -> BackfillSummary:
    """
    Run one backfill pass with the configured providers.

    Args:
        delay_seconds: Override for the per-article delay

    Returns:
        BackfillSummary: Processed and failed counts
    """
    settings = get_settings()
    await create_all_tables()

    cache = get_service_cache()
    service = BackfillService(
        corpus=cache.corpus,
        embedder=cache.embedder,
        delay_seconds=settings.backfill.delay_seconds if delay_seconds is None else delay_seconds,
    )
    try:
        return await service.run()
    finally:
        await get_async_engine().dispose()


def main():
    """CLI entry point."""
    configure_logging(get_settings().log_level)

    delay_seconds = None
    if "--delay" in sys.argv:
        idx = sys.argv.index("--delay")
        try:
            delay_seconds = float(sys.argv[idx + 1])
        except (IndexError, ValueError):
            logger.error("--delay requires a number of seconds")
            sys.exit(1)

    try:
        summary = asyncio.run(run_backfill(delay_seconds))
    except NewsBotException as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    print(f"Processed: {summary.processed_count}, Failed: {summary.failed_count}")
    sys.exit(0 if summary.failed_count == 0 else 1)


if __name__ == "__main__":
    main()
