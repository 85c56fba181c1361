"""
Embedding backfill service.

Finds articles without an embedding, embeds "title + content" for each one
in sequence and stores the vector. A failure on one article is logged and
counted without stopping the batch; a fixed delay between items keeps the
provider under its rate limit.

Dependencies: asyncio, newsbot.boundary
System role: Batch computation of missing article embeddings
"""

import asyncio
import logging
from typing import Awaitable, Callable

from pydantic import BaseModel

from newsbot.boundary.corpus_store import CorpusStore
from newsbot.boundary.db.models.article_model import ArticleModel
from newsbot.boundary.llm.embedding_gateway import EmbeddingGateway
from newsbot.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class BackfillSummary(BaseModel):
    """Counts reported at the end of a backfill run."""

    processed_count: int = 0
    failed_count: int = 0


def embedding_text(article: ArticleModel) -> str:
    """Text embedded for an article."""
    return f"{article.title}\n\n{article.content}"


class BackfillService:
    """Sequential embedding backfill over the article corpus."""

    def __init__(
        self,
        corpus: CorpusStore,
        embedder: EmbeddingGateway,
        delay_seconds: float = 0.5,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize backfill service.

        Args:
            corpus: Article corpus store
            embedder: Embedding gateway
            delay_seconds: Pause after each article
            sleep: Async sleep function
        """
        self.corpus = corpus
        self.embedder = embedder
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def run(self) -> BackfillSummary:
        """
        Embed every article that has no vector yet.

        Returns:
            BackfillSummary: Processed and failed counts

        Raises:
            StorageError: If the articles to process cannot be listed
        """
        articles = await self.corpus.list_articles_missing_embedding()
        logger.info(f"{__name__}:run - Found {len(articles)} articles without embeddings")

        summary = BackfillSummary()
        for index, article in enumerate(articles):
            try:
                logger.info(f"{__name__}:run - Generating embedding for article_id={article.id}")
                vector = await self.embedder.embed(embedding_text(article))
                if not await self.corpus.set_embedding(article.id, vector):
                    raise LookupError(f"Article {article.id} no longer exists")
                summary.processed_count += 1
            except Exception as e:
                summary.failed_count += 1
                log_exception_with_context(
                    logger,
                    "Failed to generate embedding",
                    e,
                    article_id=article.id,
                )

            if self.delay_seconds > 0 and index < len(articles) - 1:
                await self._sleep(self.delay_seconds)

        logger.info(
            f"{__name__}:run - Embedding generation complete "
            f"processed={summary.processed_count} failed={summary.failed_count}"
        )
        return summary
