"""
Provider model factories.

Builds the Google Generative AI embedding and chat models from settings.

Dependencies: langchain_google_genai, newsbot.configs
System role: Concrete provider wiring for the gateways
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from newsbot.configs.providers import ProviderSettings

logger = logging.getLogger(__name__)


def create_embeddings(settings: ProviderSettings) -> GoogleGenerativeAIEmbeddings:
    """
    Create the embeddings model.

    Args:
        settings: Provider settings

    Returns:
        GoogleGenerativeAIEmbeddings: Configured embeddings client
    """
    kwargs = {"model": settings.embedding_model}
    if settings.google_api_key:
        kwargs["google_api_key"] = settings.google_api_key
    logger.info(f"{__name__}:create_embeddings - model={settings.embedding_model}")
    return GoogleGenerativeAIEmbeddings(**kwargs)


def create_chat_model(settings: ProviderSettings) -> ChatGoogleGenerativeAI:
    """
    Create the chat model.

    Retries are disabled so one pipeline step makes one provider call.

    Args:
        settings: Provider settings

    Returns:
        ChatGoogleGenerativeAI: Configured chat client
    """
    kwargs = {
        "model": settings.chat_model,
        "temperature": settings.temperature,
        "max_output_tokens": settings.max_output_tokens,
        "max_retries": 0,
    }
    if settings.google_api_key:
        kwargs["google_api_key"] = settings.google_api_key
    logger.info(f"{__name__}:create_chat_model - model={settings.chat_model}")
    return ChatGoogleGenerativeAI(**kwargs)
