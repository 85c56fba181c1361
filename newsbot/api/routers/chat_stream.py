"""
WebSocket realtime chat endpoint.

Subscribes the connection to its session's events, replays the current
history once, then relays every appended message (from this or any other
connection, or from the HTTP API) as it happens.

Routes: WS /ws/chat/{session_id}

Dependencies: newsbot.application.services.chat_service, newsbot.application.realtime
System role: WebSocket realtime HTTP API
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from newsbot.api.deps import get_chat_service
from newsbot.application.realtime import Subscription
from newsbot.application.services.chat_service import ChatService
from newsbot.core.exceptions import NewsBotException, ValidationError
from newsbot.models.streaming import ClientEventType, RealtimeEventType

logger = logging.getLogger(__name__)
router = APIRouter(tags=["streaming"])


def _error_event(session_id: str, code: str, message: str) -> dict:
    return {
        "event": RealtimeEventType.ERROR.value,
        "data": {"session_id": session_id, "code": code, "message": message},
    }


async def _forward_events(websocket: WebSocket, subscription: Subscription) -> None:
    """Relay subscription events to the socket until the subscription closes."""
    async for event in subscription:
        await websocket.send_json(event.to_dict())


@router.websocket("/ws/chat/{session_id}")
async def websocket_chat(
    websocket: WebSocket,
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> None:
    """
    WebSocket endpoint for realtime chat.

    Client sends:
        {"event": "message", "data": {"message": "..."}}
        {"event": "clear"}
        {"event": "ping"}

    Server sends:
        {"event": "history", "data": {"session_id": "...", "messages": [...]}}
        {"event": "message", "data": {"session_id": "...", "message": {...}}}
        {"event": "cleared", "data": {"session_id": "..."}}
        {"event": "pong", "data": {"session_id": "..."}}
        {"event": "error", "data": {"session_id": "...", "code": "...", "message": "..."}}

    Args:
        websocket: WebSocket connection
        session_id: Session identifier from path
        chat_service: Injected ChatService
    """
    session_id = ChatService.resolve_session(session_id)
    await websocket.accept()
    logger.info(
        "WebSocket connection established",
        extra={"session_id": session_id, "client_host": websocket.client},
    )

    # Subscribe before reading history so no message falls between the two
    subscription = chat_service.fanout.subscribe(session_id) if chat_service.fanout else None
    forward_task: asyncio.Task | None = None

    try:
        try:
            messages = await chat_service.get_history(session_id)
        except NewsBotException as e:
            logger.error(f"{__name__}:websocket_chat - {e}")
            messages = []
            await websocket.send_json(
                _error_event(session_id, "HISTORY_FAILED", "Failed to load chat history")
            )

        await websocket.send_json({
            "event": RealtimeEventType.HISTORY.value,
            "data": {
                "session_id": session_id,
                "messages": [message.model_dump(mode="json") for message in messages],
            },
        })

        if subscription is not None:
            forward_task = asyncio.create_task(_forward_events(websocket, subscription))

        while True:
            raw_data = await websocket.receive_text()

            try:
                data = json.loads(raw_data)
            except json.JSONDecodeError as e:
                logger.warning(
                    "Failed to parse JSON",
                    extra={"session_id": session_id, "error_msg": str(e)},
                )
                await websocket.send_json(
                    _error_event(session_id, "INVALID_JSON", "Invalid JSON format")
                )
                continue

            event_type = data.get("event") if isinstance(data, dict) else None

            if event_type == ClientEventType.PING.value:
                await websocket.send_json({
                    "event": RealtimeEventType.PONG.value,
                    "data": {"session_id": session_id},
                })
                continue

            if event_type == ClientEventType.CLEAR.value:
                try:
                    await chat_service.clear_history(session_id)
                except NewsBotException as e:
                    logger.error(f"{__name__}:websocket_chat - {e}")
                    await websocket.send_json(
                        _error_event(session_id, "CLEAR_FAILED", "Failed to clear chat session")
                    )
                continue

            if event_type == ClientEventType.MESSAGE.value:
                event_data = data.get("data") or {}
                message = event_data.get("message") if isinstance(event_data, dict) else None
                if not isinstance(message, str):
                    await websocket.send_json(
                        _error_event(session_id, "INVALID_MESSAGE", "Message is required")
                    )
                    continue

                # Turns reach this socket through the subscription
                try:
                    await chat_service.process_chat(message=message, session_id=session_id)
                except ValidationError as e:
                    await websocket.send_json(
                        _error_event(session_id, "INVALID_MESSAGE", e.message)
                    )
                except NewsBotException as e:
                    logger.error(f"{__name__}:websocket_chat - {e}")
                    await websocket.send_json(
                        _error_event(session_id, "CHAT_FAILED", "Failed to process chat message")
                    )
                continue

            logger.warning(
                "Unknown event type",
                extra={"session_id": session_id, "event_type": str(event_type)},
            )
            await websocket.send_json(
                _error_event(session_id, "UNKNOWN_EVENT", f"Unknown event type: {event_type}")
            )

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected", extra={"session_id": session_id})
    finally:
        if subscription is not None:
            subscription.close()
        if forward_task is not None:
            forward_task.cancel()
            try:
                await forward_task
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.debug(
                    f"{__name__}:websocket_chat - Forward task ended with error",
                    extra={"session_id": session_id, "error_msg": str(e)},
                )
