"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_backfill_service,
    get_chat_service,
    get_corpus_store,
    get_service_cache,
    get_transcript_service,
)

__all__ = [
    "get_backfill_service",
    "get_chat_service",
    "get_corpus_store",
    "get_service_cache",
    "get_transcript_service",
]
