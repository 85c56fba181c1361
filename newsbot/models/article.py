"""
Article schemas.

Dependencies: pydantic
System role: Article API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ArticleResponse(BaseModel):
    """Article as returned to API callers (embedding omitted)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    url: str | None = None
    source: str | None = None
    published_at: datetime | None = None
    has_embedding: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, article) -> "ArticleResponse":
        """Build from an ArticleModel row."""
        return cls(
            id=article.id,
            title=article.title,
            content=article.content,
            url=article.url,
            source=article.source,
            published_at=article.published_at,
            has_embedding=article.embedding_vector is not None,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )


class BackfillResponse(BaseModel):
    """Response schema for the embedding backfill job."""

    processed_count: int
    failed_count: int
