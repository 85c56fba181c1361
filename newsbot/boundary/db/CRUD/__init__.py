"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from newsbot.boundary.db.CRUD import article_crud

    articles = await article_crud.list_articles(db)
"""

from newsbot.boundary.db.CRUD.base_crud import BaseCRUD
from newsbot.boundary.db.CRUD.article_crud import ArticleCRUD, article_crud
from newsbot.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from newsbot.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from newsbot.boundary.db.CRUD.transcript_crud import TranscriptCRUD, transcript_crud

__all__ = [
    "BaseCRUD",
    "ArticleCRUD",
    "article_crud",
    "SessionCRUD",
    "session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
    "TranscriptCRUD",
    "transcript_crud",
]
