"""
Embedding gateway.

Converts text to a fixed-length vector through a LangChain Embeddings
provider. One provider call per invocation; no caching and no retry.

Dependencies: langchain_core
System role: Embedding adapter shared by query-time ranking and corpus backfill
"""

import logging
import math

from langchain_core.embeddings import Embeddings

from newsbot.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class EmbeddingGateway:
    """
    Text-to-vector adapter around a LangChain embeddings model.

    Attributes:
        provider_name: Identifier used in logs and errors
        dimension: Expected vector length (None skips the check)
    """

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int | None = None,
        provider_name: str | None = None,
    ) -> None:
        """
        Initialize gateway with an embeddings model.

        Args:
            embeddings: LangChain Embeddings implementation
            dimension: Expected vector length; 0 or None disables the check
            provider_name: Name for logs (defaults to the model class name)
        """
        self._embeddings = embeddings
        self.dimension = dimension or None
        self.provider_name = provider_name or type(embeddings).__name__

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector

        Raises:
            ProviderError: If the call fails or returns an unusable payload
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            logger.error(
                f"{__name__}:embed - Provider call failed: {type(e).__name__}: {e}"
            )
            raise ProviderError(
                f"Failed to generate embedding: {e}",
                provider=self.provider_name,
                operation="embed",
            ) from e

        return self._validate(vector)

    def _validate(self, vector) -> list[float]:
        if not isinstance(vector, (list, tuple)) or not vector:
            raise ProviderError(
                "Embedding payload is not a non-empty vector",
                provider=self.provider_name,
                operation="embed",
            )
        try:
            values = [float(v) for v in vector]
        except (TypeError, ValueError) as e:
            raise ProviderError(
                "Embedding payload contains non-numeric values",
                provider=self.provider_name,
                operation="embed",
            ) from e
        if not all(math.isfinite(v) for v in values):
            raise ProviderError(
                "Embedding payload contains non-finite values",
                provider=self.provider_name,
                operation="embed",
            )
        if self.dimension is not None and len(values) != self.dimension:
            raise ProviderError(
                f"Embedding has {len(values)} dimensions, expected {self.dimension}",
                provider=self.provider_name,
                operation="embed",
            )
        return values
