"""
Realtime fan-out of session events.

In-process publish/subscribe keyed by session id. Each subscriber owns a
bounded queue; delivery is best-effort and at-most-once, with no replay
of events published before the subscription started.

Dependencies: asyncio, newsbot.models.streaming
System role: Broadcasts appended messages to live subscribers of a session
"""

import asyncio
import logging

from newsbot.models.streaming import RealtimeEvent

logger = logging.getLogger(__name__)


class Subscription:
    """
    Live stream of events for one session.

    Use as an async context manager and iterate it. Leaving the context (or
    calling close) unsubscribes; iteration then stops.
    """

    _CLOSED = object()

    def __init__(self, fanout: "RealtimeFanout", session_id: str, max_queue: int) -> None:
        self.session_id = session_id
        self._fanout = fanout
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_queue)
        self.closed = False
        self.dropped = 0

    def _offer(self, event: RealtimeEvent) -> bool:
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            self.dropped += 1
            return False
        return True

    async def get(self) -> RealtimeEvent | None:
        """Wait for the next event; None once the subscription is closed."""
        if self.closed and self._queue.empty():
            return None
        item = await self._queue.get()
        if item is self._CLOSED:
            return None
        return item

    def close(self) -> None:
        """Unsubscribe. Pending events can still be drained."""
        if self.closed:
            return
        self.closed = True
        self._fanout._remove(self)
        try:
            self._queue.put_nowait(self._CLOSED)
        except asyncio.QueueFull:
            # A full queue still ends iteration once drained
            pass

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> RealtimeEvent:
        event = await self.get()
        if event is None:
            raise StopAsyncIteration
        return event


class RealtimeFanout:
    """Publish/subscribe registry of live session subscribers."""

    def __init__(self, max_queue: int = 100) -> None:
        """
        Initialize fan-out.

        Args:
            max_queue: Events buffered per subscriber before new ones are dropped
        """
        self._max_queue = max(max_queue, 1)
        self._subscribers: dict[str, set[Subscription]] = {}

    def subscribe(self, session_id: str) -> Subscription:
        """
        Start receiving events for a session from now on.

        Args:
            session_id: Session identifier

        Returns:
            Subscription: Async-iterable event stream
        """
        subscription = Subscription(self, session_id, self._max_queue)
        self._subscribers.setdefault(session_id, set()).add(subscription)
        logger.debug(
            f"{__name__}:subscribe - session_id={session_id} "
            f"subscribers={len(self._subscribers[session_id])}"
        )
        return subscription

    def publish(self, session_id: str, event: RealtimeEvent) -> int:
        """
        Deliver an event to every current subscriber of a session.

        Args:
            session_id: Session identifier
            event: Event to deliver

        Returns:
            int: Number of subscribers that received the event
        """
        delivered = 0
        for subscription in list(self._subscribers.get(session_id, ())):
            if subscription._offer(event):
                delivered += 1
            else:
                logger.warning(
                    f"{__name__}:publish - Subscriber queue full, event dropped "
                    f"session_id={session_id}"
                )
        return delivered

    def subscriber_count(self, session_id: str) -> int:
        """Number of live subscribers of a session."""
        return len(self._subscribers.get(session_id, ()))

    def _remove(self, subscription: Subscription) -> None:
        subscribers = self._subscribers.get(subscription.session_id)
        if not subscribers:
            return
        subscribers.discard(subscription)
        if not subscribers:
            del self._subscribers[subscription.session_id]
