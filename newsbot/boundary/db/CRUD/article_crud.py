"""
Article CRUD operations.

Corpus store contract consumed by the RAG pipeline and the embedding
backfill job: list articles, list articles missing an embedding, set an
article's embedding.

Dependencies: sqlalchemy, newsbot.boundary.db.models
System role: Article corpus persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsbot.boundary.db.models.article_model import ArticleModel
from newsbot.boundary.db.CRUD.base_crud import BaseCRUD
from newsbot.core.vector_math import encode_embedding


class ArticleCRUD(BaseCRUD[ArticleModel]):
    """CRUD operations for ArticleModel."""

    def __init__(self) -> None:
        """Initialize ArticleCRUD with ArticleModel."""
        super().__init__(ArticleModel)

    async def list_articles(self, session: AsyncSession) -> Sequence[ArticleModel]:
        """
        Retrieve the whole corpus, newest first.

        The returned order is the corpus order used to break ranking ties.

        Args:
            session: Async database session

        Returns:
            Sequence of ArticleModel rows
        """
        stmt = select(ArticleModel).order_by(
            ArticleModel.created_at.desc(),
            ArticleModel.id.desc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_articles_missing_embedding(
        self,
        session: AsyncSession,
    ) -> Sequence[ArticleModel]:
        """
        Retrieve articles whose embedding has not been computed yet.

        Args:
            session: Async database session

        Returns:
            Sequence of ArticleModel rows ordered by id
        """
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.embedding_vector.is_(None))
            .order_by(ArticleModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def set_embedding(
        self,
        session: AsyncSession,
        id: int,
        vector: Sequence[float],
    ) -> bool:
        """
        Store an article's embedding.

        Only embedding_vector (and the updated_at timestamp) change.

        Args:
            session: Async database session
            id: Article id
            vector: Full embedding vector

        Returns:
            True if the article exists and was updated
        """
        return await self.update_by_id(
            session,
            id,
            embedding_vector=encode_embedding(vector),
        )


article_crud = ArticleCRUD()
