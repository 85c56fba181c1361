"""
Transcript service.

Archives a snapshot of a session's current history as one JSON document.

Dependencies: sqlalchemy, newsbot.boundary
System role: Conversation archiving use case
"""

import logging
import uuid

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsbot.boundary.db.CRUD.transcript_crud import transcript_crud
from newsbot.boundary.session_log.base import SessionLog
from newsbot.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class TranscriptRecord(BaseModel):
    """Stored snapshot summary."""

    id: uuid.UUID
    session_id: str
    count: int


class TranscriptService:
    """Snapshots session history into the chat_transcripts table."""

    def __init__(
        self,
        session_log: SessionLog,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """
        Initialize transcript service.

        Args:
            session_log: Source of the history to archive
            session_factory: Async session factory for the database
        """
        self.session_log = session_log
        self._session_factory = session_factory

    async def persist(self, session_id: str) -> TranscriptRecord:
        """
        Store the session's current history as a transcript.

        Args:
            session_id: Session identifier

        Returns:
            TranscriptRecord: Transcript id and message count

        Raises:
            StorageError: If reading history or writing the transcript fails
        """
        messages = await self.session_log.history(session_id)
        payload = [message.model_dump(mode="json") for message in messages]

        try:
            async with self._session_factory() as db:
                row = await transcript_crud.create(
                    db,
                    session_id=session_id,
                    transcript=payload,
                )
                await db.commit()
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:persist - Write failed for session_id={session_id}: {e}")
            raise StorageError("Failed to persist transcript", operation="persist") from e

        logger.info(
            f"{__name__}:persist - Stored transcript id={row.id} "
            f"session_id={session_id} count={len(payload)}"
        )
        return TranscriptRecord(id=row.id, session_id=session_id, count=len(payload))
