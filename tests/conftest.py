"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite database, deterministic embedding and chat models,
article seeding helpers
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import os

# Settings are read at import time by some modules; keep tests off real services
os.environ.setdefault("POSTGRES_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CHAT_SESSION_STORE", "memory")

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.fake_chat_models import FakeListChatModel


VOCABULARY = ["climate", "election", "football", "market", "space"]


class KeywordEmbeddings(Embeddings):
    """
    Deterministic embeddings counting vocabulary words.

    Text mentioning "climate" points along the first axis, "election" along
    the second, and so on, so similarity follows shared topics.
    """

    def __init__(self, vocabulary: list[str] | None = None, fail_on: str | None = None):
        self.vocabulary = vocabulary or VOCABULARY
        self.fail_on = fail_on
        self.calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_on and self.fail_on in text:
            raise RuntimeError(f"provider unavailable for {self.fail_on!r}")
        lowered = text.lower()
        return [float(lowered.count(word)) for word in self.vocabulary]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._vector(text)


@pytest.fixture
async def async_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine sharing a single connection (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from newsbot.boundary.db import create_all_tables, drop_all_tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    """Provide session factory bound to the test engine."""
    from newsbot.boundary.db import build_session_factory

    return build_session_factory(async_engine)


@pytest.fixture
async def test_async_db(session_factory):
    """
    Provide a database session for direct CRUD tests.

    Yields:
        AsyncSession: Session rolled back after the test
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Provide deterministic keyword embeddings."""
    return KeywordEmbeddings()


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    """Provide chat model answering with a fixed reply."""
    return FakeListChatModel(responses=["Here is what the articles say."])


@pytest.fixture
def seed_articles(session_factory):
    """
    Provide an async helper inserting articles.

    Usage:
        articles = await seed_articles(("Title", "Content", [1.0, 0.0]), ...)
    """
    from newsbot.boundary.db.models import ArticleModel
    from newsbot.core.vector_math import encode_embedding

    async def _seed(*rows):
        created = []
        async with session_factory() as session:
            for title, content, vector in rows:
                article = ArticleModel(
                    title=title,
                    content=content,
                    embedding_vector=encode_embedding(vector) if vector is not None else None,
                )
                session.add(article)
                await session.flush()
                created.append(article)
            await session.commit()
        return created

    return _seed


@pytest.fixture
def make_embeddings():
    """Provide KeywordEmbeddings factory (e.g. make_embeddings(fail_on="Story 3"))."""
    return KeywordEmbeddings
