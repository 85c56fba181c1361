"""
Test suite for session and health endpoints.

System role: Verification of session management HTTP API
"""

import uuid
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from newsbot.application.services import TranscriptRecord
from newsbot.boundary.db import get_async_db
from newsbot.core.exceptions import StorageError


class TestResolveSession:
    """Test suite for POST /sessions."""

    def test_should_echo_given_session(self, client: TestClient) -> None:
        """Test an existing id is returned unchanged."""
        response = client.post("/api/v1/sessions", json={"session_id": "abc"})

        assert response.status_code == 200
        assert response.json() == {"session_id": "abc"}

    def test_should_generate_session_when_missing(self, client: TestClient) -> None:
        """Test a UUID is generated without a body."""
        response = client.post("/api/v1/sessions")

        assert response.status_code == 200
        uuid.UUID(response.json()["session_id"])


class TestPersistTranscript:
    """Test suite for POST /sessions/{session_id}/persist."""

    def test_should_return_transcript_summary(self, client: TestClient, mock_transcript_service) -> None:
        """Test the transcript id and message count are returned."""
        transcript_id = uuid.uuid4()
        mock_transcript_service.persist = AsyncMock(
            return_value=TranscriptRecord(id=transcript_id, session_id="s1", count=2)
        )

        response = client.post("/api/v1/sessions/s1/persist")

        assert response.status_code == 200
        assert response.json() == {"id": str(transcript_id), "session_id": "s1", "count": 2}
        mock_transcript_service.persist.assert_awaited_once_with("s1")

    def test_storage_failure_should_return_500(self, client: TestClient, mock_transcript_service) -> None:
        """Test write failures map to 500."""
        mock_transcript_service.persist = AsyncMock(side_effect=StorageError("down"))

        response = client.post("/api/v1/sessions/s1/persist")

        assert response.status_code == 500


class TestHealth:
    """Test suite for GET /health."""

    def test_health_should_report_healthy(self, client: TestClient) -> None:
        """Test liveness endpoint."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_db_health_should_report_healthy(self, app, client: TestClient) -> None:
        """Test the database probe succeeds when the query runs."""
        app.dependency_overrides[get_async_db] = lambda: AsyncMock()

        response = client.get("/api/v1/health/db")

        assert response.status_code == 200

    def test_db_health_should_return_503_when_unreachable(self, app, client: TestClient) -> None:
        """Test database errors map to 503."""
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("refused")))
        app.dependency_overrides[get_async_db] = lambda: db

        response = client.get("/api/v1/health/db")

        assert response.status_code == 503
        assert response.json() == {"detail": "Database unavailable"}
