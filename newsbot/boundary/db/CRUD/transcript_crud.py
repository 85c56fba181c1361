"""
Chat transcript CRUD operations.

Dependencies: sqlalchemy, newsbot.boundary.db.models
System role: Archived conversation persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newsbot.boundary.db.models.transcript_model import ChatTranscriptModel
from newsbot.boundary.db.CRUD.base_crud import BaseCRUD


class TranscriptCRUD(BaseCRUD[ChatTranscriptModel]):
    """CRUD operations for ChatTranscriptModel."""

    def __init__(self) -> None:
        """Initialize TranscriptCRUD with ChatTranscriptModel."""
        super().__init__(ChatTranscriptModel)

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: str,
    ) -> Sequence[ChatTranscriptModel]:
        """Retrieve all snapshots of a session, oldest first."""
        stmt = (
            select(ChatTranscriptModel)
            .where(ChatTranscriptModel.session_id == session_id)
            .order_by(ChatTranscriptModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


transcript_crud = TranscriptCRUD()
