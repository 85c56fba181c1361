"""
Database models package.

Exports:
  - ArticleModel: Corpus article
  - ChatSessionModel, ChatMessageModel: Relational session log
  - ChatTranscriptModel: Archived session snapshots

Dependencies: sqlalchemy, newsbot.boundary.db.base
System role: Database model definitions for domain entities
"""

from newsbot.boundary.db.models.article_model import ArticleModel
from newsbot.boundary.db.models.chat_session_model import ChatSessionModel
from newsbot.boundary.db.models.chat_message_model import ChatMessageModel
from newsbot.boundary.db.models.transcript_model import ChatTranscriptModel

__all__ = [
    "ArticleModel",
    "ChatSessionModel",
    "ChatMessageModel",
    "ChatTranscriptModel",
]
