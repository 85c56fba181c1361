"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - create_all_tables(), drop_all_tables(): Schema provisioning
  - ArticleModel, ChatSessionModel, ChatMessageModel, ChatTranscriptModel: Domain entities
  - article_crud, session_crud, chat_message_crud, transcript_crud: CRUD singletons

Dependencies: sqlalchemy, newsbot.configs
System role: Database adapter for the article corpus, session log and transcripts
"""

from newsbot.boundary.db.base import Base, TimestampMixin, UUIDMixin
from newsbot.boundary.db.connection import (
    build_session_factory,
    create_all_tables,
    drop_all_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from newsbot.boundary.db.models import (
    ArticleModel,
    ChatMessageModel,
    ChatSessionModel,
    ChatTranscriptModel,
)
from newsbot.boundary.db.CRUD import (
    BaseCRUD,
    ArticleCRUD,
    SessionCRUD,
    ChatMessageCRUD,
    TranscriptCRUD,
    article_crud,
    session_crud,
    chat_message_crud,
    transcript_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "build_session_factory",
    "create_all_tables",
    "drop_all_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ArticleModel",
    "ChatMessageModel",
    "ChatSessionModel",
    "ChatTranscriptModel",
    # CRUD classes
    "BaseCRUD",
    "ArticleCRUD",
    "SessionCRUD",
    "ChatMessageCRUD",
    "TranscriptCRUD",
    # CRUD singletons
    "article_crud",
    "session_crud",
    "chat_message_crud",
    "transcript_crud",
]
