"""
Chat service for grounded news Q&A.

Orchestrates the full chat flow: user turn persistence, corpus loading,
query embedding, similarity ranking, answer generation, assistant turn
persistence and realtime publication.

Dependencies: newsbot.boundary, newsbot.core, newsbot.application.realtime
System role: RAG pipeline orchestration layer
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum

from newsbot.application.realtime import RealtimeFanout
from newsbot.boundary.corpus_store import CorpusStore
from newsbot.boundary.db.models.article_model import ArticleModel
from newsbot.boundary.llm.embedding_gateway import EmbeddingGateway
from newsbot.boundary.llm.generation_gateway import GenerationGateway
from newsbot.boundary.session_log.base import SessionLog
from newsbot.core.exceptions import ChatProcessingError, ValidationError
from newsbot.core.rag_prompt import NO_ARTICLES_REPLY, SYSTEM_PROMPT, build_context
from newsbot.core.ranker import rank_articles
from newsbot.models.chat import ChatMessage, ChatRole
from newsbot.models.streaming import RealtimeEvent, RealtimeEventType
from newsbot.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ChatPipelineState(str, Enum):
    """Stages of one chat exchange."""

    RECEIVED_QUERY = "received_query"
    USER_TURN_PERSISTED = "user_turn_persisted"
    CORPUS_LOADED = "corpus_loaded"
    QUERY_EMBEDDED = "query_embedded"
    CONTEXT_RANKED = "context_ranked"
    ANSWER_GENERATED = "answer_generated"
    ASSISTANT_TURN_PERSISTED = "assistant_turn_persisted"
    PUBLISHED = "published"
    FAILED = "failed"


@dataclass
class ChatResult:
    """Outcome of a successful exchange."""

    message: str
    session_id: str
    sources: list[ArticleModel] = field(default_factory=list)
    assistant_message: ChatMessage | None = None


class ChatService:
    """
    Chat service for retrieval-augmented conversations.

    All collaborators are injected so tests can substitute fakes for the
    providers, the corpus and the session log.
    """

    def __init__(
        self,
        session_log: SessionLog,
        corpus: CorpusStore,
        embedder: EmbeddingGateway,
        generator: GenerationGateway,
        fanout: RealtimeFanout | None = None,
        top_k: int = 3,
        excerpt_chars: int = 1000,
        persona: str = SYSTEM_PROMPT,
    ) -> None:
        """
        Initialize chat service.

        Args:
            session_log: Conversation history store
            corpus: Article corpus store
            embedder: Query embedding gateway
            generator: Answer generation gateway
            fanout: Realtime publisher (None disables publishing)
            top_k: Articles used as context
            excerpt_chars: Content characters per article in the prompt
            persona: System instruction for generation
        """
        self.session_log = session_log
        self.corpus = corpus
        self.embedder = embedder
        self.generator = generator
        self.fanout = fanout
        self.top_k = top_k
        self.excerpt_chars = excerpt_chars
        self.persona = persona

    @staticmethod
    def resolve_session(session_id: str | None = None) -> str:
        """
        Use the caller's session id or generate a new one.

        Args:
            session_id: Optional caller-supplied id

        Returns:
            str: Session id for the exchange
        """
        if session_id and session_id.strip():
            return session_id.strip()
        return str(uuid.uuid4())

    def _advance(self, session_id: str, state: ChatPipelineState) -> ChatPipelineState:
        logger.debug(f"{__name__}:process_chat - session_id={session_id} state={state.value}")
        return state

    def _publish(self, message: ChatMessage) -> None:
        if self.fanout is None:
            return
        self.fanout.publish(
            message.session_id,
            RealtimeEvent(
                event=RealtimeEventType.MESSAGE,
                session_id=message.session_id,
                message=message,
            ),
        )

    async def process_chat(
        self,
        message: str,
        session_id: str | None = None,
    ) -> ChatResult:
        """
        Answer a message from the news corpus and record the exchange.

        Flow:
        1. Validate the message
        2. Resolve the session id
        3. Persist and publish the user turn
        4. Load the corpus (empty corpus short-circuits to a fixed reply)
        5. Embed the query and rank articles
        6. Build the bounded article context
        7. Generate the answer
        8. Persist the assistant turn with its source ids
        9. Publish the assistant turn

        Args:
            message: User's message
            session_id: Existing session to continue, or None for a new one

        Returns:
            ChatResult: Answer, session id and the articles used

        Raises:
            ValidationError: If the message is empty (nothing is persisted)
            ChatProcessingError: If any later step fails; the user turn is kept
        """
        if message is None or not message.strip():
            raise ValidationError("Message is required", field="message")

        session_id = self.resolve_session(session_id)
        state = self._advance(session_id, ChatPipelineState.RECEIVED_QUERY)
        logger.info(f"{__name__}:process_chat - START session_id={session_id} message_len={len(message)}")

        try:
            user_turn = await self.session_log.append(session_id, ChatRole.USER, message)
            state = self._advance(session_id, ChatPipelineState.USER_TURN_PERSISTED)
            self._publish(user_turn)

            articles = await self.corpus.list_articles()
            state = self._advance(session_id, ChatPipelineState.CORPUS_LOADED)

            if not articles:
                logger.info(f"{__name__}:process_chat - Empty corpus, sending fixed reply")
                assistant_turn = await self.session_log.append(
                    session_id, ChatRole.ASSISTANT, NO_ARTICLES_REPLY, sources=[]
                )
                state = self._advance(session_id, ChatPipelineState.ASSISTANT_TURN_PERSISTED)
                self._publish(assistant_turn)
                self._advance(session_id, ChatPipelineState.PUBLISHED)
                return ChatResult(
                    message=NO_ARTICLES_REPLY,
                    session_id=session_id,
                    sources=[],
                    assistant_message=assistant_turn,
                )

            query_vector = await self.embedder.embed(message)
            state = self._advance(session_id, ChatPipelineState.QUERY_EMBEDDED)

            ranked = rank_articles(query_vector, articles, self.top_k)
            relevant = [match.item for match in ranked]
            state = self._advance(session_id, ChatPipelineState.CONTEXT_RANKED)
            logger.info(
                f"{__name__}:process_chat - Ranked {len(relevant)} of {len(articles)} articles "
                f"scores={[round(match.score, 4) for match in ranked]}"
            )

            answer = await self.generator.complete(
                question=message,
                context=build_context(relevant, self.excerpt_chars),
                persona=self.persona,
            )
            state = self._advance(session_id, ChatPipelineState.ANSWER_GENERATED)

            assistant_turn = await self.session_log.append(
                session_id,
                ChatRole.ASSISTANT,
                answer,
                sources=[article.id for article in relevant],
            )
            state = self._advance(session_id, ChatPipelineState.ASSISTANT_TURN_PERSISTED)

            self._publish(assistant_turn)
            self._advance(session_id, ChatPipelineState.PUBLISHED)

        except Exception as e:
            log_exception_with_context(
                logger,
                "Chat pipeline failed",
                e,
                session_id=session_id,
                failed_after=state.value,
            )
            raise ChatProcessingError(session_id=session_id) from e

        logger.info(f"{__name__}:process_chat - END session_id={session_id} answer_len={len(answer)}")
        return ChatResult(
            message=answer,
            session_id=session_id,
            sources=relevant,
            assistant_message=assistant_turn,
        )

    async def get_history(self, session_id: str) -> list[ChatMessage]:
        """
        Get a session's messages, oldest first (empty for unknown sessions).

        Raises:
            StorageError: If the session store is unavailable
        """
        return await self.session_log.history(session_id)

    async def clear_history(self, session_id: str) -> None:
        """
        Delete a session and notify its subscribers. Idempotent.

        Raises:
            StorageError: If the session store is unavailable
        """
        await self.session_log.clear(session_id)
        if self.fanout is not None:
            self.fanout.publish(
                session_id,
                RealtimeEvent(event=RealtimeEventType.CLEARED, session_id=session_id),
            )
        logger.info(f"{__name__}:clear_history - Cleared session_id={session_id}")
