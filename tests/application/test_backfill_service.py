"""
Test suite for BackfillService.

System role: Verification of the embedding backfill job
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from newsbot.application.services.backfill_service import BackfillService, embedding_text
from newsbot.boundary.corpus_store import CorpusStore
from newsbot.boundary.llm import EmbeddingGateway
from newsbot.core.exceptions import StorageError


@pytest.fixture
def corpus(session_factory) -> CorpusStore:
    """Provide CorpusStore over the test database."""
    return CorpusStore(session_factory=session_factory)


class TestBackfillRun:
    """Test suite for BackfillService.run."""

    @pytest.mark.asyncio
    async def test_should_continue_past_single_failure(
        self, corpus: CorpusStore, seed_articles, make_embeddings
    ) -> None:
        """Test one failing article is counted while the rest are embedded."""
        # Arrange
        await seed_articles(*[(f"Story {i}", f"climate {i}", None) for i in range(1, 6)])
        embedder = EmbeddingGateway(make_embeddings(fail_on="Story 3"))
        service = BackfillService(corpus=corpus, embedder=embedder, delay_seconds=0)

        # Act
        summary = await service.run()

        # Assert
        assert summary.processed_count == 4
        assert summary.failed_count == 1
        remaining = await corpus.list_articles_missing_embedding()
        assert [a.title for a in remaining] == ["Story 3"]

    @pytest.mark.asyncio
    async def test_rerun_should_only_retry_failures(
        self, corpus: CorpusStore, seed_articles, make_embeddings
    ) -> None:
        """Test a second run picks up only articles still missing a vector."""
        await seed_articles(("Done", "climate", [1.0, 0.0, 0.0, 0.0, 0.0]), ("Todo", "space", None))
        embeddings = make_embeddings()
        service = BackfillService(corpus=corpus, embedder=EmbeddingGateway(embeddings), delay_seconds=0)

        summary = await service.run()

        assert (summary.processed_count, summary.failed_count) == (1, 0)
        assert embeddings.calls == ["Todo\n\nspace"]

    @pytest.mark.asyncio
    async def test_nothing_missing_should_report_zero(self, corpus: CorpusStore, keyword_embeddings) -> None:
        """Test an empty backlog is a no-op."""
        service = BackfillService(corpus=corpus, embedder=EmbeddingGateway(keyword_embeddings))

        summary = await service.run()

        assert (summary.processed_count, summary.failed_count) == (0, 0)

    @pytest.mark.asyncio
    async def test_should_sleep_between_articles(self, corpus: CorpusStore, seed_articles, keyword_embeddings) -> None:
        """Test the throttle delay runs between items but not after the last."""
        await seed_articles(("A", "a", None), ("B", "b", None), ("C", "c", None))
        sleep = AsyncMock()
        service = BackfillService(
            corpus=corpus,
            embedder=EmbeddingGateway(keyword_embeddings),
            delay_seconds=0.5,
            sleep=sleep,
        )

        await service.run()

        assert sleep.await_count == 2
        sleep.assert_awaited_with(0.5)

    @pytest.mark.asyncio
    async def test_listing_failure_should_propagate(self, keyword_embeddings) -> None:
        """Test a corpus that cannot be listed fails the run."""
        corpus = AsyncMock()
        corpus.list_articles_missing_embedding = AsyncMock(side_effect=StorageError("down"))
        service = BackfillService(corpus=corpus, embedder=EmbeddingGateway(keyword_embeddings))

        with pytest.raises(StorageError):
            await service.run()

    @pytest.mark.asyncio
    async def test_vanished_article_should_count_as_failure(self, keyword_embeddings, seed_articles) -> None:
        """Test an article deleted mid-run is reported as failed."""
        (article,) = await seed_articles(("Gone", "text", None))
        store = AsyncMock()
        store.list_articles_missing_embedding = AsyncMock(return_value=[article])
        store.set_embedding = AsyncMock(return_value=False)
        service = BackfillService(corpus=store, embedder=EmbeddingGateway(keyword_embeddings), delay_seconds=0)

        summary = await service.run()

        assert (summary.processed_count, summary.failed_count) == (0, 1)


class TestEmbeddingText:
    """Test suite for embedding_text."""

    def test_should_join_title_and_content(self) -> None:
        """Test the embedded text is title, blank line, content."""
        assert embedding_text(SimpleNamespace(title="T", content="C")) == "T\n\nC"
