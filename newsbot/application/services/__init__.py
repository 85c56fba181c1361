"""Service orchestrators."""

from .backfill_service import BackfillService, BackfillSummary
from .chat_service import ChatPipelineState, ChatResult, ChatService
from .transcript_service import TranscriptRecord, TranscriptService

__all__ = [
    "BackfillService",
    "BackfillSummary",
    "ChatPipelineState",
    "ChatResult",
    "ChatService",
    "TranscriptRecord",
    "TranscriptService",
]
