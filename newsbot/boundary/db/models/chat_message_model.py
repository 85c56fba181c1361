"""
Chat message ORM model.

Immutable conversation turns. The autoincrement id is the per-store sequence
that orders a session's history.

Dependencies: sqlalchemy, newsbot.boundary.db.base
System role: Message rows for the relational session log
"""

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsbot.boundary.db.base import Base, CreatedAtMixin


class ChatMessageModel(Base, CreatedAtMixin):
    """
    Chat message ORM model.

    Attributes:
        id: Monotonic integer sequence
        session_id: Owning session
        role: 'user' or 'assistant'
        content: Message text
        sources: Ordered article ids (assistant turns with context only)
        created_at: Insertion timestamp (UTC)
    """

    __tablename__ = "chat_messages"
    __table_args__ = (Index("ix_chat_messages_session_id_id", "session_id", "id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[str] = mapped_column(
        ForeignKey("chat_sessions.session_id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    sources: Mapped[list[int] | None] = mapped_column(JSON, nullable=True, default=None)

    session = relationship("ChatSessionModel", back_populates="messages")
