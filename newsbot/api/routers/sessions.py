"""
Session API endpoints.

Routes:
- POST /sessions - Resolve a session id (echo the given one or generate one)
- POST /sessions/{session_id}/persist - Archive the session's history as a transcript

Dependencies: newsbot.application.services
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from newsbot.api.deps import get_transcript_service
from newsbot.application.services.chat_service import ChatService
from newsbot.application.services.transcript_service import TranscriptService
from newsbot.core.exceptions import NewsBotException
from newsbot.models.chat import SessionRequest, SessionResponse, TranscriptResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=SessionResponse)
async def resolve_session(request: SessionRequest | None = None) -> SessionResponse:
    """
    Return the given session id, or a newly generated one.

    Sessions are stored lazily on their first message, so nothing is written here.
    """
    session_id = request.session_id if request else None
    return SessionResponse(session_id=ChatService.resolve_session(session_id))


@router.post("/{session_id}/persist", response_model=TranscriptResponse)
async def persist_transcript(
    session_id: str,
    transcript_service: TranscriptService = Depends(get_transcript_service),
) -> TranscriptResponse:
    """
    Store a snapshot of the session's current history.

    Args:
        session_id: Session identifier
        transcript_service: Injected TranscriptService

    Returns:
        TranscriptResponse: Transcript id and message count

    Raises:
        HTTPException(500): Persisting failed
    """
    try:
        record = await transcript_service.persist(session_id)
    except NewsBotException as e:
        logger.error(f"{__name__}:persist_transcript - {e}")
        raise HTTPException(status_code=500, detail="Failed to persist transcript")

    return TranscriptResponse(
        id=str(record.id),
        session_id=record.session_id,
        count=record.count,
    )
