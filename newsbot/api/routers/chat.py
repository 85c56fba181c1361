"""Chat API endpoints.

Routes:
- POST /chat - Send a message, get a grounded answer with sources
- GET /chat/{session_id} - Get a session's chat history
- DELETE /chat/{session_id} - Clear a session

Dependencies: newsbot.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from newsbot.api.deps import get_chat_service
from newsbot.application.services.chat_service import ChatService
from newsbot.core.exceptions import NewsBotException, ValidationError
from newsbot.models.article import ArticleResponse
from newsbot.models.chat import ChatHistoryResponse, ChatRequest, ChatResponse
from newsbot.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send a chat message and receive an answer grounded in the news corpus.

    Args:
        request: ChatRequest with message and optional session_id
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer, session id and the articles used as sources

    Raises:
        HTTPException(422): Empty message
        HTTPException(500): Processing error (the user message stays in history)
    """
    try:
        result = await chat_service.process_chat(
            message=request.message,
            session_id=request.session_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except NewsBotException as e:
        logger.error(f"{__name__}:chat - {e}")
        raise HTTPException(status_code=500, detail="Failed to process chat message")

    return ChatResponse(
        message=result.message,
        session_id=result.session_id,
        sources=[ArticleResponse.from_model(article) for article in result.sources],
    )


@router.get("/{session_id}", response_model=ChatHistoryResponse)
async def get_chat_history(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatHistoryResponse:
    """
    Get chat history for a session.

    Unknown sessions return an empty message list.

    Args:
        session_id: Session identifier
        chat_service: Injected ChatService

    Returns:
        ChatHistoryResponse: Messages oldest first

    Raises:
        HTTPException(500): Retrieval failed
    """
    try:
        messages = await chat_service.get_history(session_id)
    except NewsBotException as e:
        logger.error(f"{__name__}:get_chat_history - {e}")
        raise HTTPException(status_code=500, detail="Failed to get chat history")

    return ChatHistoryResponse(messages=messages, session_id=session_id)


@router.delete("/{session_id}", response_model=SuccessResponse)
async def clear_chat_history(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> SuccessResponse:
    """
    Clear a session's history. Clearing an unknown session succeeds.

    Args:
        session_id: Session identifier
        chat_service: Injected ChatService

    Returns:
        SuccessResponse: Acknowledgement

    Raises:
        HTTPException(500): Deletion failed
    """
    try:
        await chat_service.clear_history(session_id)
    except NewsBotException as e:
        logger.error(f"{__name__}:clear_chat_history - {e}")
        raise HTTPException(status_code=500, detail="Failed to clear chat session")

    return SuccessResponse()
