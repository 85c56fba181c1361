"""Model provider adapters: embedding and generation gateways."""

from newsbot.boundary.llm.embedding_gateway import EmbeddingGateway
from newsbot.boundary.llm.generation_gateway import GenerationGateway

__all__ = ["EmbeddingGateway", "GenerationGateway"]
