"""
Chat session ORM model.

One row per conversation thread, keyed by the caller-facing session id.

Dependencies: sqlalchemy, newsbot.boundary.db.base
System role: Session record for the relational session log
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsbot.boundary.db.base import Base, TimestampMixin


class ChatSessionModel(Base, TimestampMixin):
    """
    Chat session ORM model.

    The primary key on session_id is the uniqueness constraint that makes
    create-if-absent an atomic upsert.

    Attributes:
        session_id: Client-supplied or generated session identifier
        messages: Messages of this session (deleted with the session)
    """

    __tablename__ = "chat_sessions"

    session_id: Mapped[str] = mapped_column(String(255), primary_key=True)

    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
