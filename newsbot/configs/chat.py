"""
Chat, retrieval and backfill configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for the RAG pipeline and session log
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from newsbot.configs.base import BaseSettings


class ChatSettings(BaseSettings):
    """Session log and realtime fan-out configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="ignore",
    )

    session_store: Literal["sql", "memory"] = Field(
        default="sql",
        description="Session log backend: relational table or in-memory list store",
    )
    ttl_seconds: int = Field(
        default=0,
        description="Drop session history older than this many seconds (0 keeps forever)",
    )
    subscriber_queue_size: int = Field(
        default=100,
        description="Pending events buffered per realtime subscriber",
    )


class RAGSettings(BaseSettings):
    """Retrieval and prompt-building configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=3, description="Articles used as generation context")
    excerpt_chars: int = Field(default=1000, description="Content characters per article in context")


class BackfillSettings(BaseSettings):
    """Embedding backfill job configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BACKFILL_",
        case_sensitive=False,
        extra="ignore",
    )

    delay_seconds: float = Field(default=0.5, description="Pause between provider calls")


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
