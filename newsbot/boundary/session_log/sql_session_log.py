"""
Relational session log.

Stores sessions and messages in SQL tables. Every operation runs in its own
short transaction; the session row is created with an atomic upsert.

Dependencies: sqlalchemy, newsbot.boundary.db
System role: Default SessionLog backend
"""

import logging
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from newsbot.boundary.db.base import utcnow
from newsbot.boundary.db.CRUD.chat_message_crud import chat_message_crud
from newsbot.boundary.db.CRUD.session_crud import session_crud
from newsbot.boundary.session_log.base import SessionLog
from newsbot.core.exceptions import StorageError
from newsbot.models.chat import ChatMessage, ChatRole

logger = logging.getLogger(__name__)


class SqlSessionLog(SessionLog):
    """SessionLog backed by the chat_sessions and chat_messages tables."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        ttl_seconds: int = 0,
    ) -> None:
        """
        Initialize relational session log.

        Args:
            session_factory: Async session factory for the database
            ttl_seconds: Message retention in seconds (0 disables)
        """
        super().__init__(ttl_seconds=ttl_seconds)
        self._session_factory = session_factory

    def _cutoff(self) -> datetime | None:
        if not self.ttl_seconds:
            return None
        return utcnow() - timedelta(seconds=self.ttl_seconds)

    async def _history(self, session_id: str) -> list[ChatMessage]:
        try:
            async with self._session_factory() as db:
                rows = await chat_message_crud.list_for_session(
                    db, session_id, since=self._cutoff()
                )
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:history - Query failed for session_id={session_id}: {e}")
            raise StorageError("Failed to read chat history", operation="history") from e

        return [ChatMessage.model_validate(row) for row in rows]

    async def _append(
        self,
        session_id: str,
        role: ChatRole,
        content: str,
        sources: list[int] | None,
    ) -> ChatMessage:
        try:
            async with self._session_factory() as db:
                await session_crud.upsert(db, session_id)

                cutoff = self._cutoff()
                if cutoff is not None:
                    # Sweeps every session; the current one was just refreshed by the upsert
                    expired = await chat_message_crud.delete_older_than(db, before=cutoff)
                    idle = await session_crud.delete_idle(db, before=cutoff)
                    if expired or idle:
                        logger.debug(
                            f"{__name__}:append - Dropped {expired} expired messages "
                            f"and {idle} idle sessions"
                        )

                row = await chat_message_crud.create(
                    db,
                    session_id=session_id,
                    role=role.value,
                    content=content,
                    sources=sources,
                )
                await db.commit()
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:append - Write failed for session_id={session_id}: {e}")
            raise StorageError("Failed to append chat message", operation="append") from e

        return ChatMessage.model_validate(row)

    async def _clear(self, session_id: str) -> None:
        try:
            async with self._session_factory() as db:
                # Explicit message delete; SQLite does not enforce FK cascades by default
                await chat_message_crud.delete_for_session(db, session_id)
                await session_crud.delete(db, session_id)
                await db.commit()
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:clear - Delete failed for session_id={session_id}: {e}")
            raise StorageError("Failed to clear chat session", operation="clear") from e
