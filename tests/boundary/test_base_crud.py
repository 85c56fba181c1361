"""
Test suite for BaseCRUD and the model-specific CRUD classes.

System role: Verification of generic persistence operations
"""

import pytest

from newsbot.boundary.db import article_crud, transcript_crud


class TestBaseCRUD:
    """Test suite for BaseCRUD via ArticleCRUD."""

    @pytest.mark.asyncio
    async def test_create_should_assign_id_and_timestamps(self, test_async_db) -> None:
        """Test created rows get a primary key and timestamps."""
        article = await article_crud.create(test_async_db, title="T", content="C")

        assert article.id is not None
        assert article.created_at is not None
        assert article.updated_at is not None
        assert article.embedding_vector is None

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_row(self, test_async_db) -> None:
        """Test lookup by primary key."""
        article = await article_crud.create(test_async_db, title="T", content="C")

        found = await article_crud.get_by_id(test_async_db, article.id)

        assert found is not None
        assert found.title == "T"

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_should_return_none(self, test_async_db) -> None:
        """Test missing rows return None."""
        assert await article_crud.get_by_id(test_async_db, 12345) is None

    @pytest.mark.asyncio
    async def test_update_by_id_should_report_match(self, test_async_db) -> None:
        """Test update returns whether a row matched."""
        article = await article_crud.create(test_async_db, title="T", content="C")

        assert await article_crud.update_by_id(test_async_db, article.id, title="New") is True
        assert await article_crud.update_by_id(test_async_db, 999, title="New") is False


class TestTranscriptCRUD:
    """Test suite for TranscriptCRUD."""

    @pytest.mark.asyncio
    async def test_list_for_session_should_return_snapshots(self, test_async_db) -> None:
        """Test snapshots are listed per session."""
        await transcript_crud.create(test_async_db, session_id="s1", transcript=[])
        await transcript_crud.create(test_async_db, session_id="s1", transcript=[{"content": "hi"}])
        await transcript_crud.create(test_async_db, session_id="s2", transcript=[])

        snapshots = await transcript_crud.list_for_session(test_async_db, "s1")

        assert len(snapshots) == 2
        assert {len(s.transcript) for s in snapshots} == {0, 1}
