"""
Realtime event schemas.

Events delivered to subscribers of a session and the client-to-server
events accepted on the WebSocket channel.

Dependencies: pydantic
System role: Realtime protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from newsbot.models.chat import ChatMessage


class RealtimeEventType(str, Enum):
    """Server-to-client event types."""

    HISTORY = "history"
    MESSAGE = "message"
    CLEARED = "cleared"
    ERROR = "error"
    PONG = "pong"


class ClientEventType(str, Enum):
    """Client-to-server event types."""

    MESSAGE = "message"
    CLEAR = "clear"
    PING = "ping"


class RealtimeEvent(BaseModel):
    """
    Event published to a session's subscribers.

    Attributes:
        event: Event type identifier
        session_id: Session the event belongs to
        message: Appended message (for MESSAGE events)
    """

    event: RealtimeEventType
    session_id: str
    message: ChatMessage | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        data: dict[str, Any] = {"session_id": self.session_id}
        if self.message is not None:
            data["message"] = self.message.model_dump(mode="json")
        return {"event": self.event.value, "data": data}
