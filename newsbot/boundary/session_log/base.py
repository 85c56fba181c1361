"""
Session log contract.

Append-only, session-scoped message history with read, append and clear.
Appends and clears for one session are serialized through a per-session
asyncio lock; different sessions never contend.

Dependencies: asyncio, newsbot.models.chat
System role: Sole source of truth for conversation state
"""

import asyncio
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from newsbot.core.exceptions import ValidationError
from newsbot.models.chat import ChatMessage, ChatRole


class SessionLocks:
    """Registry of per-session locks, dropped when no task holds or awaits them."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, session_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(session_id, asyncio.Lock())
        self._holders[session_id] = self._holders.get(session_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[session_id] -= 1
            if not self._holders[session_id]:
                del self._holders[session_id]
                del self._locks[session_id]

    def __len__(self) -> int:
        return len(self._locks)


class SessionLog(ABC):
    """
    Base class for session log backends.

    Subclasses implement the storage primitives; this class owns input
    validation and per-session serialization.

    Attributes:
        ttl_seconds: History retention in seconds (0 keeps history forever)
    """

    def __init__(self, ttl_seconds: int = 0) -> None:
        """
        Initialize session log.

        Args:
            ttl_seconds: History older than this is dropped silently (0 disables)
        """
        self.ttl_seconds = max(ttl_seconds, 0)
        self._locks = SessionLocks()

    async def history(self, session_id: str) -> list[ChatMessage]:
        """
        Read a session's messages, oldest first.

        Args:
            session_id: Session identifier

        Returns:
            list[ChatMessage]: Messages in append order (empty for unknown sessions)

        Raises:
            StorageError: If the backing store is unavailable
        """
        return await self._history(session_id)

    async def append(
        self,
        session_id: str,
        role: ChatRole | str,
        content: str,
        sources: Sequence[int] | None = None,
    ) -> ChatMessage:
        """
        Record a message, creating the session if absent.

        Args:
            session_id: Session identifier
            role: Message author
            content: Message text
            sources: Article ids used as context (assistant turns only)

        Returns:
            ChatMessage: Stored message with its sequence id

        Raises:
            ValidationError: If the session id is empty or a user turn carries sources
            StorageError: If the backing store is unavailable
        """
        if not session_id:
            raise ValidationError("Session id is required", field="session_id")
        role = ChatRole(role)
        if role is ChatRole.USER and sources:
            raise ValidationError("User messages cannot carry sources", field="sources")
        source_ids = list(sources) if sources is not None and role is ChatRole.ASSISTANT else None

        async with self._locks.hold(session_id):
            return await self._append(session_id, role, content, source_ids)

    async def clear(self, session_id: str) -> None:
        """
        Delete all messages and the session record. Idempotent.

        Args:
            session_id: Session identifier

        Raises:
            StorageError: If the backing store is unavailable
        """
        async with self._locks.hold(session_id):
            await self._clear(session_id)

    @abstractmethod
    async def _history(self, session_id: str) -> list[ChatMessage]:
        ...

    @abstractmethod
    async def _append(
        self,
        session_id: str,
        role: ChatRole,
        content: str,
        sources: list[int] | None,
    ) -> ChatMessage:
        ...

    @abstractmethod
    async def _clear(self, session_id: str) -> None:
        ...
