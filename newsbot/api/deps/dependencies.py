"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived collaborators
(provider clients, session log, realtime fan-out) are built once and
cached; services are cheap wrappers assembled per request.

Dependencies: newsbot.configs, newsbot.application, newsbot.boundary
System role: DI container for service injection
"""

from newsbot.application.realtime import RealtimeFanout
from newsbot.application.services import BackfillService, ChatService, TranscriptService
from newsbot.boundary.corpus_store import CorpusStore
from newsbot.boundary.db import get_async_session_factory
from newsbot.boundary.llm import EmbeddingGateway, GenerationGateway
from newsbot.boundary.session_log import MemorySessionLog, SessionLog, SqlSessionLog
from newsbot.configs import get_settings


class ServiceCache:
    """Container for cached collaborator instances."""

    def __init__(self):
        self._session_log = None
        self._fanout = None
        self._corpus = None
        self._embedder = None
        self._generator = None

    @property
    def session_log(self) -> SessionLog:
        """Get cached session log for the configured backend."""
        if self._session_log is None:
            chat_config = get_settings().chat
            if chat_config.session_store == "memory":
                self._session_log = MemorySessionLog(ttl_seconds=chat_config.ttl_seconds)
            else:
                self._session_log = SqlSessionLog(
                    session_factory=get_async_session_factory(),
                    ttl_seconds=chat_config.ttl_seconds,
                )
        return self._session_log

    @property
    def fanout(self) -> RealtimeFanout:
        """Get cached realtime fan-out."""
        if self._fanout is None:
            self._fanout = RealtimeFanout(max_queue=get_settings().chat.subscriber_queue_size)
        return self._fanout

    @property
    def corpus(self) -> CorpusStore:
        """Get cached corpus store."""
        if self._corpus is None:
            self._corpus = CorpusStore(session_factory=get_async_session_factory())
        return self._corpus

    @property
    def embedder(self) -> EmbeddingGateway:
        """Get cached embedding gateway."""
        if self._embedder is None:
            # Lazy import to avoid loading provider SDKs at startup
            from newsbot.boundary.llm.providers import create_embeddings

            provider_config = get_settings().providers
            self._embedder = EmbeddingGateway(
                embeddings=create_embeddings(provider_config),
                dimension=provider_config.embedding_dimension,
                provider_name=provider_config.embedding_model,
            )
        return self._embedder

    @property
    def generator(self) -> GenerationGateway:
        """Get cached generation gateway."""
        if self._generator is None:
            from newsbot.boundary.llm.providers import create_chat_model

            provider_config = get_settings().providers
            self._generator = GenerationGateway(
                model=create_chat_model(provider_config),
                provider_name=provider_config.chat_model,
            )
        return self._generator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_log = None
        self._fanout = None
        self._corpus = None
        self._embedder = None
        self._generator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_corpus_store() -> CorpusStore:
    """
    Get article corpus store.

    Returns:
        CorpusStore: Shared corpus store
    """
    return get_service_cache().corpus


def get_chat_service() -> ChatService:
    """
    Get chat service wired to the cached collaborators.

    Returns:
        ChatService: Chat service with session log, corpus, gateways and fan-out
    """
    cache = get_service_cache()
    rag_config = get_settings().rag
    return ChatService(
        session_log=cache.session_log,
        corpus=cache.corpus,
        embedder=cache.embedder,
        generator=cache.generator,
        fanout=cache.fanout,
        top_k=rag_config.top_k,
        excerpt_chars=rag_config.excerpt_chars,
    )


def get_backfill_service() -> BackfillService:
    """
    Get embedding backfill service.

    Returns:
        BackfillService: Backfill service with configured throttle
    """
    cache = get_service_cache()
    return BackfillService(
        corpus=cache.corpus,
        embedder=cache.embedder,
        delay_seconds=get_settings().backfill.delay_seconds,
    )


def get_transcript_service() -> TranscriptService:
    """
    Get transcript service.

    Returns:
        TranscriptService: Transcript service over the shared session log
    """
    return TranscriptService(
        session_log=get_service_cache().session_log,
        session_factory=get_async_session_factory(),
    )
