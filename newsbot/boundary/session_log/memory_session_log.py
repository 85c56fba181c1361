"""
In-memory list-backed session log.

Each session id maps to a list of messages, like a key-value store holding
one list per key. With a TTL the whole key expires after that many seconds
without an append; every append sweeps all expired keys.

Dependencies: itertools, time
System role: Alternative SessionLog backend for single-process deployments and tests
"""

import itertools
import time
from typing import Callable

from newsbot.boundary.session_log.base import SessionLog
from newsbot.models.chat import ChatMessage, ChatRole


class MemorySessionLog(SessionLog):
    """SessionLog holding history in process memory."""

    def __init__(
        self,
        ttl_seconds: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize in-memory session log.

        Args:
            ttl_seconds: Key expiry after the last append (0 disables)
            clock: Monotonic time source in seconds
        """
        super().__init__(ttl_seconds=ttl_seconds)
        self._clock = clock
        self._messages: dict[str, list[ChatMessage]] = {}
        self._touched_at: dict[str, float] = {}
        self._sequence = itertools.count(1)

    def _expire(self, session_id: str) -> None:
        if not self.ttl_seconds or session_id not in self._touched_at:
            return
        if self._clock() - self._touched_at[session_id] >= self.ttl_seconds:
            self._messages.pop(session_id, None)
            self._touched_at.pop(session_id, None)

    def _sweep(self) -> None:
        """Drop every key idle for longer than the TTL."""
        if not self.ttl_seconds:
            return
        now = self._clock()
        expired = [
            session_id
            for session_id, touched_at in self._touched_at.items()
            if now - touched_at >= self.ttl_seconds
        ]
        for session_id in expired:
            self._messages.pop(session_id, None)
            self._touched_at.pop(session_id, None)

    async def _history(self, session_id: str) -> list[ChatMessage]:
        self._expire(session_id)
        return list(self._messages.get(session_id, []))

    async def _append(
        self,
        session_id: str,
        role: ChatRole,
        content: str,
        sources: list[int] | None,
    ) -> ChatMessage:
        self._sweep()
        message = ChatMessage(
            id=next(self._sequence),
            session_id=session_id,
            role=role,
            content=content,
            sources=sources,
        )
        self._messages.setdefault(session_id, []).append(message)
        self._touched_at[session_id] = self._clock()
        return message

    async def _clear(self, session_id: str) -> None:
        self._messages.pop(session_id, None)
        self._touched_at.pop(session_id, None)
