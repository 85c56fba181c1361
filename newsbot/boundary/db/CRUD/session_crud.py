"""
Chat session CRUD operations.

Provides the create-if-absent primitive for chat sessions and session
deletion. The upsert relies on the primary key constraint on session_id,
so concurrent first appends never duplicate a session.

Dependencies: sqlalchemy
System role: Session record persistence operations
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from newsbot.boundary.db.base import utcnow
from newsbot.boundary.db.models.chat_session_model import ChatSessionModel

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SessionCRUD:
    """
    CRUD operations for ChatSessionModel.

    Sessions are keyed by a text session_id rather than a generated id,
    so this class does not extend BaseCRUD.
    """

    async def upsert(self, session: AsyncSession, session_id: str) -> None:
        """
        Create the session if absent, otherwise refresh updated_at.

        Args:
            session: Async database session
            session_id: Session identifier

        Raises:
            NotImplementedError: If the database dialect has no ON CONFLICT support
        """
        dialect = session.get_bind().dialect.name
        insert = _DIALECT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Session upsert not supported for dialect {dialect}")

        now = utcnow()
        stmt = (
            insert(ChatSessionModel)
            .values(session_id=session_id, created_at=now, updated_at=now)
            .on_conflict_do_update(
                index_elements=[ChatSessionModel.session_id],
                set_={"updated_at": now},
            )
        )
        await session.execute(stmt)

    async def get(self, session: AsyncSession, session_id: str) -> ChatSessionModel | None:
        """
        Retrieve a session record.

        Args:
            session: Async database session
            session_id: Session identifier

        Returns:
            ChatSessionModel if found, None otherwise
        """
        stmt = select(ChatSessionModel).where(ChatSessionModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, session: AsyncSession, session_id: str) -> bool:
        """
        Delete a session record.

        Args:
            session: Async database session
            session_id: Session identifier

        Returns:
            True if a session was deleted, False if it did not exist
        """
        stmt = delete(ChatSessionModel).where(ChatSessionModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_idle(self, session: AsyncSession, before: datetime) -> int:
        """
        Delete sessions with no append since a cutoff.

        Callers remove the sessions' messages first; SQLite does not cascade by default.

        Args:
            session: Async database session
            before: Sessions last updated before this time are deleted

        Returns:
            int: Number of deleted sessions
        """
        stmt = delete(ChatSessionModel).where(ChatSessionModel.updated_at < before)
        result = await session.execute(stmt)
        return result.rowcount


session_crud = SessionCRUD()
