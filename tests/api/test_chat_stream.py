"""
Test suite for the WebSocket realtime chat endpoint.

Tests history replay, message fan-out across connections, clear, ping and
error events for WS /ws/chat/{session_id}.

System role: Verification of WebSocket realtime API
"""

import asyncio
import json

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from newsbot.api.routers.chat_stream import websocket_chat
from newsbot.models.chat import ChatRole


class TestConnect:
    """Test suite for connection setup."""

    def test_should_send_empty_history_for_new_session(self, client: TestClient) -> None:
        """Test the first event is the (empty) history."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            event = websocket.receive_json()

        assert event == {"event": "history", "data": {"session_id": "s1", "messages": []}}

    def test_should_replay_existing_history(self, client: TestClient) -> None:
        """Test messages sent over HTTP are replayed on connect."""
        client.post("/api/v1/chat", json={"message": "climate?", "session_id": "s1"})

        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            event = websocket.receive_json()

        assert event["event"] == "history"
        assert [m["role"] for m in event["data"]["messages"]] == ["user", "assistant"]


class TestMessages:
    """Test suite for chat over the socket."""

    def test_message_should_stream_both_turns(self, client: TestClient) -> None:
        """Test sending a message delivers the user and assistant turns."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            # Act
            websocket.send_json({"event": "message", "data": {"message": "climate?"}})
            user_event = websocket.receive_json()
            assistant_event = websocket.receive_json()

        # Assert
        assert user_event["event"] == "message"
        assert user_event["data"]["message"]["role"] == ChatRole.USER.value
        assert user_event["data"]["message"]["content"] == "climate?"
        assert assistant_event["data"]["message"]["role"] == ChatRole.ASSISTANT.value
        assert assistant_event["data"]["message"]["sources"] == [1, 2]

    def test_other_connections_should_receive_messages(self, client: TestClient) -> None:
        """Test a second subscriber of the session sees the exchange."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as sender, \
                client.websocket_connect("/api/v1/ws/chat/s1") as watcher:
            sender.receive_json()
            watcher.receive_json()

            sender.send_json({"event": "message", "data": {"message": "election?"}})

            first = watcher.receive_json()
            second = watcher.receive_json()

        assert [first["data"]["message"]["role"], second["data"]["message"]["role"]] == [
            "user",
            "assistant",
        ]

    def test_http_message_should_reach_socket(self, client: TestClient) -> None:
        """Test messages posted over HTTP are pushed to live sockets."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            client.post("/api/v1/chat", json={"message": "climate?", "session_id": "s1"})

            assert websocket.receive_json()["data"]["message"]["content"] == "climate?"

    def test_empty_message_should_return_error_event(self, client: TestClient) -> None:
        """Test blank messages produce an error event and no turns."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            websocket.send_json({"event": "message", "data": {"message": "  "}})
            event = websocket.receive_json()

        assert event["event"] == "error"
        assert event["data"]["code"] == "INVALID_MESSAGE"
        assert client.get("/api/v1/chat/s1").json()["messages"] == []


class TestControlEvents:
    """Test suite for ping, clear and malformed input."""

    def test_ping_should_return_pong(self, client: TestClient) -> None:
        """Test keepalive."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            websocket.send_json({"event": "ping"})

            assert websocket.receive_json()["event"] == "pong"

    def test_clear_should_broadcast_cleared(self, client: TestClient) -> None:
        """Test clear empties history and notifies subscribers."""
        client.post("/api/v1/chat", json={"message": "climate?", "session_id": "s1"})

        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            websocket.send_json({"event": "clear"})

            assert websocket.receive_json() == {"event": "cleared", "data": {"session_id": "s1"}}

        assert client.get("/api/v1/chat/s1").json()["messages"] == []

    def test_invalid_json_should_return_error_event(self, client: TestClient) -> None:
        """Test unparseable frames are reported and the socket stays open."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            websocket.send_text("{not json")
            error = websocket.receive_json()
            websocket.send_json({"event": "ping"})
            pong = websocket.receive_json()

        assert error["data"]["code"] == "INVALID_JSON"
        assert pong["event"] == "pong"

    def test_unknown_event_should_return_error_event(self, client: TestClient) -> None:
        """Test unsupported event types are reported."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()

            websocket.send_json({"event": "dance"})

            assert websocket.receive_json()["data"]["code"] == "UNKNOWN_EVENT"

    def test_disconnect_should_unsubscribe(self, client: TestClient, chat_service) -> None:
        """Test closing the socket removes its subscription."""
        with client.websocket_connect("/api/v1/ws/chat/s1") as websocket:
            websocket.receive_json()
            websocket.send_json({"event": "ping"})
            websocket.receive_json()
            assert chat_service.fanout.subscriber_count("s1") == 1

        # Closing is processed asynchronously by the server
        for _ in range(100):
            if chat_service.fanout.subscriber_count("s1") == 0:
                break
            client.get("/api/v1/health")

        assert chat_service.fanout.subscriber_count("s1") == 0


class BrokenTransportWebSocket:
    """WebSocket stand-in whose sends of fan-out events fail at the transport."""

    client = None

    def __init__(self, incoming: list[str]) -> None:
        self.incoming = list(incoming)
        self.sent: list[dict] = []

    async def accept(self) -> None:
        return None

    async def send_json(self, data: dict) -> None:
        if data["event"] == "message":
            raise OSError("connection reset by peer")
        self.sent.append(data)

    async def receive_text(self) -> str:
        if self.incoming:
            return self.incoming.pop(0)
        # Let the forward task hit the failing send before the client leaves
        await asyncio.sleep(0.01)
        raise WebSocketDisconnect(code=1006)


class TestForwardFailure:
    """Test suite for a relay task that dies on a transport error."""

    @pytest.mark.asyncio
    async def test_send_error_in_relay_should_not_escape_cleanup(self, chat_service) -> None:
        """Test the endpoint returns normally and unsubscribes after a relay send error."""
        # Arrange
        websocket = BrokenTransportWebSocket(
            [json.dumps({"event": "message", "data": {"message": "climate?"}})]
        )

        # Act
        await websocket_chat(websocket, "s1", chat_service=chat_service)

        # Assert
        assert websocket.sent[0]["event"] == "history"
        assert chat_service.fanout.subscriber_count("s1") == 0
        assert [m.role for m in await chat_service.get_history("s1")] == [
            ChatRole.USER,
            ChatRole.ASSISTANT,
        ]
