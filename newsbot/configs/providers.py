"""
Model provider configuration settings.

Embedding and chat completion models used by the RAG pipeline.

Dependencies: pydantic, pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from newsbot.configs.base import BaseSettings


class ProviderSettings(BaseSettings):
    """Google Generative AI provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROVIDER_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str | None = Field(default=None, description="Google Generative AI API key")
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Embedding model identifier",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Expected embedding length (0 disables the check)",
    )
    chat_model: str = Field(default="gemini-2.0-flash", description="Chat completion model")
    temperature: float = Field(default=0.7, description="Sampling temperature")
    max_output_tokens: int = Field(default=800, description="Completion token cap")
