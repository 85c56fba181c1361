"""
Generation gateway.

Produces a grounded answer from a persona, the user's question and the
ranked article context, using a LangChain chat model.

Dependencies: langchain_core
System role: Completion adapter for the RAG pipeline
"""

import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from newsbot.core.exceptions import ProviderError
from newsbot.core.rag_prompt import RAG_PROMPT, SYSTEM_PROMPT

logger = logging.getLogger(__name__)

EMPTY_COMPLETION_REPLY = "I apologize, but I was unable to generate a response."


class GenerationGateway:
    """Chat completion adapter around a LangChain chat model."""

    def __init__(self, model: BaseChatModel, provider_name: str | None = None) -> None:
        """
        Initialize gateway with a chat model.

        Args:
            model: LangChain chat model
            provider_name: Name for logs (defaults to the model class name)
        """
        self._model = model
        self.provider_name = provider_name or type(model).__name__
        self._chain = RAG_PROMPT | model | StrOutputParser()

    async def complete(
        self,
        question: str,
        context: str,
        persona: str = SYSTEM_PROMPT,
    ) -> str:
        """
        Generate an answer.

        Args:
            question: User's question
            context: Rendered article context
            persona: System instruction

        Returns:
            str: Model answer (a fixed apology when the model returns nothing)

        Raises:
            ProviderError: If the model call fails
        """
        try:
            answer = await self._chain.ainvoke({
                "persona": persona,
                "question": question,
                "context": context,
            })
        except Exception as e:
            logger.error(
                f"{__name__}:complete - Provider call failed: {type(e).__name__}: {e}"
            )
            raise ProviderError(
                f"Failed to generate response: {e}",
                provider=self.provider_name,
                operation="complete",
            ) from e

        return answer.strip() or EMPTY_COMPLETION_REPLY
