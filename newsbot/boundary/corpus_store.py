"""
Article corpus store.

Transaction-scoped wrapper over ArticleCRUD used by the RAG pipeline and
the backfill job. Every call opens its own session, so a stored embedding
is committed independently of any other article.

Dependencies: sqlalchemy, newsbot.boundary.db
System role: Corpus store contract (list, list missing embedding, set embedding)
"""

import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsbot.boundary.db.CRUD.article_crud import ArticleCRUD, article_crud
from newsbot.boundary.db.models.article_model import ArticleModel
from newsbot.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class CorpusStore:
    """Read access to articles plus the single embedding write."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        crud: ArticleCRUD = article_crud,
    ) -> None:
        """
        Initialize corpus store.

        Args:
            session_factory: Async session factory for the database
            crud: Article CRUD implementation
        """
        self._session_factory = session_factory
        self._crud = crud

    async def list_articles(self) -> Sequence[ArticleModel]:
        """
        Load the whole corpus in corpus order (newest first).

        Raises:
            StorageError: If the database is unavailable
        """
        try:
            async with self._session_factory() as db:
                return await self._crud.list_articles(db)
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:list_articles - Query failed: {e}")
            raise StorageError("Failed to load articles", operation="list_articles") from e

    async def list_articles_missing_embedding(self) -> Sequence[ArticleModel]:
        """
        Load articles without an embedding.

        Raises:
            StorageError: If the database is unavailable
        """
        try:
            async with self._session_factory() as db:
                return await self._crud.list_articles_missing_embedding(db)
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:list_articles_missing_embedding - Query failed: {e}")
            raise StorageError(
                "Failed to load articles missing embeddings",
                operation="list_articles_missing_embedding",
            ) from e

    async def set_embedding(self, article_id: int, vector: Sequence[float]) -> bool:
        """
        Store one article's embedding in its own transaction.

        Args:
            article_id: Article id
            vector: Full embedding vector

        Returns:
            bool: True if the article existed and was updated

        Raises:
            StorageError: If the write fails (nothing is committed)
        """
        try:
            async with self._session_factory() as db:
                updated = await self._crud.set_embedding(db, article_id, vector)
                await db.commit()
                return updated
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:set_embedding - Write failed for article_id={article_id}: {e}")
            raise StorageError("Failed to store embedding", operation="set_embedding") from e
