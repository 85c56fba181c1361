"""
Chat domain models and schemas.

ChatMessage is the session log's record type; the request/response
schemas are the chat API contracts.

Dependencies: pydantic
System role: Chat domain records and API contracts
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from newsbot.models.article import ArticleResponse


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Single immutable conversation turn."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int = Field(description="Monotonic message sequence number")
    session_id: str
    role: ChatRole
    content: str
    sources: list[int] | None = Field(
        default=None,
        description="Article ids used as context (assistant turns only)",
    )
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str = Field(description="User question or message")
    session_id: str | None = Field(default=None, description="Existing session to continue")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    message: str
    session_id: str
    sources: list[ArticleResponse] = Field(default_factory=list)


class ChatHistoryResponse(BaseModel):
    """Response schema for chat history."""

    messages: list[ChatMessage]
    session_id: str


class SessionRequest(BaseModel):
    """Request schema for resolving a session id."""

    session_id: str | None = None


class SessionResponse(BaseModel):
    """Response schema for session resolution."""

    session_id: str


class TranscriptResponse(BaseModel):
    """Response schema for a persisted transcript."""

    id: str
    session_id: str
    count: int
