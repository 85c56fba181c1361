"""
API test fixtures.

Provides a FastAPI app with every router and a ChatService wired to
in-memory collaborators through dependency overrides.

Dependencies: pytest, fastapi
System role: HTTP/WebSocket test infrastructure
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from newsbot.api.deps import (
    get_backfill_service,
    get_chat_service,
    get_corpus_store,
    get_transcript_service,
)
from newsbot.api.routers import (
    articles_router,
    chat_router,
    chat_stream_router,
    health_router,
    sessions_router,
)
from newsbot.application.realtime import RealtimeFanout
from newsbot.application.services import ChatService
from newsbot.boundary.db import ArticleModel
from newsbot.boundary.llm import EmbeddingGateway, GenerationGateway
from newsbot.boundary.session_log import MemorySessionLog
from newsbot.core.vector_math import encode_embedding


def make_article(id: int, title: str, vector: list[float] | None) -> ArticleModel:
    """Build a detached article row."""
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    return ArticleModel(
        id=id,
        title=title,
        content=f"{title} content",
        embedding_vector=encode_embedding(vector) if vector is not None else None,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def articles() -> list[ArticleModel]:
    """Provide a small embedded corpus."""
    return [
        make_article(1, "Climate summit", [1.0, 0.0, 0.0, 0.0, 0.0]),
        make_article(2, "Election night", [0.0, 1.0, 0.0, 0.0, 0.0]),
        make_article(3, "Space launch", None),
    ]


@pytest.fixture
def mock_corpus(articles) -> AsyncMock:
    """Provide corpus store mock serving the sample articles."""
    corpus = AsyncMock()
    corpus.list_articles = AsyncMock(return_value=articles)
    return corpus


@pytest.fixture
def chat_service(mock_corpus, keyword_embeddings, fake_chat_model) -> ChatService:
    """Provide ChatService with in-memory collaborators."""
    return ChatService(
        session_log=MemorySessionLog(),
        corpus=mock_corpus,
        embedder=EmbeddingGateway(keyword_embeddings, dimension=5),
        generator=GenerationGateway(fake_chat_model),
        fanout=RealtimeFanout(),
        top_k=2,
    )


@pytest.fixture
def mock_backfill_service() -> AsyncMock:
    """Provide backfill service mock."""
    return AsyncMock()


@pytest.fixture
def mock_transcript_service() -> AsyncMock:
    """Provide transcript service mock."""
    return AsyncMock()


@pytest.fixture
def app(chat_service, mock_corpus, mock_backfill_service, mock_transcript_service) -> FastAPI:
    """Create FastAPI test application with all routers."""
    app = FastAPI()
    for router in (health_router, sessions_router, chat_router, articles_router, chat_stream_router):
        app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    app.dependency_overrides[get_corpus_store] = lambda: mock_corpus
    app.dependency_overrides[get_backfill_service] = lambda: mock_backfill_service
    app.dependency_overrides[get_transcript_service] = lambda: mock_transcript_service
    return app


@pytest.fixture
def client(app: FastAPI):
    """Provide TestClient sharing one event loop across requests and sockets."""
    with TestClient(app) as client:
        yield client
