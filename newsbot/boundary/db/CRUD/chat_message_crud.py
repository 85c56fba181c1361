"""
Chat message CRUD operations.

Session-scoped message rows for the relational session log.

Dependencies: sqlalchemy, newsbot.boundary.db.models
System role: Chat message persistence operations
"""

from datetime import datetime
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsbot.boundary.db.models.chat_message_model import ChatMessageModel
from newsbot.boundary.db.CRUD.base_crud import BaseCRUD


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        """Initialize ChatMessageCRUD with ChatMessageModel."""
        super().__init__(ChatMessageModel)

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: str,
        since: datetime | None = None,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve a session's messages, oldest first.

        Args:
            session: Async database session
            session_id: Session identifier
            since: Only return messages created at or after this time

        Returns:
            Sequence of ChatMessageModel rows in insertion order
        """
        stmt = select(ChatMessageModel).where(ChatMessageModel.session_id == session_id)
        if since is not None:
            stmt = stmt.where(ChatMessageModel.created_at >= since)
        stmt = stmt.order_by(ChatMessageModel.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_for_session(self, session: AsyncSession, session_id: str) -> int:
        """
        Delete all of a session's messages.

        Args:
            session: Async database session
            session_id: Session identifier

        Returns:
            int: Number of deleted rows
        """
        stmt = delete(ChatMessageModel).where(ChatMessageModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_older_than(self, session: AsyncSession, before: datetime) -> int:
        """
        Delete messages created before a cutoff, across every session.

        Args:
            session: Async database session
            before: Messages created before this time are deleted

        Returns:
            int: Number of deleted rows
        """
        stmt = delete(ChatMessageModel).where(ChatMessageModel.created_at < before)
        result = await session.execute(stmt)
        return result.rowcount


chat_message_crud = ChatMessageCRUD()
