"""
Article ORM model.

News article in the retrieval corpus. Rows are created by external ingestion;
this service only reads them and fills in missing embeddings.

Dependencies: sqlalchemy, newsbot.boundary.db.base
System role: Corpus persistence for similarity ranking
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from newsbot.boundary.db.base import Base, TimestampMixin


class ArticleModel(Base, TimestampMixin):
    """
    Article ORM model.

    Attributes:
        id: Integer primary key (stable corpus identifier)
        title: Headline
        content: Full article text
        url: Canonical link (optional)
        source: Publisher name (optional)
        published_at: Publication time (optional)
        embedding_vector: JSON-encoded float array, NULL until backfilled
    """

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
    source: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )
    embedding_vector: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        doc="Opaque encoded embedding (JSON float array)",
    )
