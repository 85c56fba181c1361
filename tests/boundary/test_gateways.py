"""
Test suite for the embedding and generation gateways.

System role: Verification of provider adapters
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from newsbot.boundary.llm import EmbeddingGateway, GenerationGateway
from newsbot.boundary.llm.generation_gateway import EMPTY_COMPLETION_REPLY
from newsbot.core.exceptions import ProviderError


def _embeddings_returning(value) -> MagicMock:
    embeddings = MagicMock()
    embeddings.aembed_query = AsyncMock(return_value=value)
    return embeddings


class TestEmbeddingGateway:
    """Test suite for EmbeddingGateway."""

    @pytest.mark.asyncio
    async def test_embed_should_return_vector(self, keyword_embeddings) -> None:
        """Test a provider vector is returned as floats."""
        gateway = EmbeddingGateway(keyword_embeddings, dimension=5)

        vector = await gateway.embed("climate news")

        assert vector == [1.0, 0.0, 0.0, 0.0, 0.0]

    @pytest.mark.asyncio
    async def test_embed_should_call_provider_once(self, keyword_embeddings) -> None:
        """Test no caching or retry: one call per embed."""
        gateway = EmbeddingGateway(keyword_embeddings)

        await gateway.embed("same text")
        await gateway.embed("same text")

        assert keyword_embeddings.calls == ["same text", "same text"]

    @pytest.mark.asyncio
    async def test_provider_failure_should_raise_provider_error(self) -> None:
        """Test transport errors become ProviderError."""
        embeddings = MagicMock()
        embeddings.aembed_query = AsyncMock(side_effect=TimeoutError("timed out"))
        gateway = EmbeddingGateway(embeddings, provider_name="test-embedder")

        with pytest.raises(ProviderError) as exc_info:
            await gateway.embed("text")

        assert exc_info.value.details == {"provider": "test-embedder", "operation": "embed"}
        assert embeddings.aembed_query.await_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [None, [], ["a", "b"], [1.0, float("nan")], {"values": [1]}])
    async def test_malformed_payload_should_raise_provider_error(self, payload) -> None:
        """Test unusable provider payloads are rejected."""
        gateway = EmbeddingGateway(_embeddings_returning(payload))

        with pytest.raises(ProviderError):
            await gateway.embed("text")

    @pytest.mark.asyncio
    async def test_wrong_dimension_should_raise_provider_error(self) -> None:
        """Test vectors of the wrong length are rejected when a dimension is configured."""
        gateway = EmbeddingGateway(_embeddings_returning([1.0, 2.0]), dimension=768)

        with pytest.raises(ProviderError):
            await gateway.embed("text")


class TestGenerationGateway:
    """Test suite for GenerationGateway."""

    @pytest.mark.asyncio
    async def test_complete_should_return_model_answer(self, fake_chat_model) -> None:
        """Test the model reply is returned."""
        gateway = GenerationGateway(fake_chat_model)

        answer = await gateway.complete(question="What happened?", context="Title: A\nContent: B")

        assert answer == "Here is what the articles say."

    @pytest.mark.asyncio
    async def test_empty_answer_should_fall_back_to_apology(self) -> None:
        """Test a blank completion is replaced with a fixed reply."""
        gateway = GenerationGateway(FakeListChatModel(responses=["   "]))

        answer = await gateway.complete(question="Q", context="")

        assert answer == EMPTY_COMPLETION_REPLY

    @pytest.mark.asyncio
    async def test_model_failure_should_raise_provider_error(self) -> None:
        """Test model errors become ProviderError with the operation name."""
        # Arrange
        gateway = GenerationGateway(FakeListChatModel(responses=["unused"]), provider_name="test-llm")
        gateway._chain = MagicMock()
        gateway._chain.ainvoke = AsyncMock(side_effect=RuntimeError("quota exceeded"))

        # Act / Assert
        with pytest.raises(ProviderError) as exc_info:
            await gateway.complete(question="Q", context="C")

        assert exc_info.value.details["operation"] == "complete"
