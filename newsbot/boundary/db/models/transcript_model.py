"""
Chat transcript ORM model.

Point-in-time snapshot of a session's history, kept independently of the
live session log.

Dependencies: sqlalchemy, newsbot.boundary.db.base
System role: Archived conversation storage
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from newsbot.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class ChatTranscriptModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Chat transcript ORM model.

    Attributes:
        id: UUID primary key
        session_id: Session the snapshot was taken from (no foreign key, survives clear)
        transcript: Serialized message list
        created_at: Snapshot time (UTC)
    """

    __tablename__ = "chat_transcripts"

    session_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    transcript: Mapped[list[dict]] = mapped_column(JSON, nullable=False)
