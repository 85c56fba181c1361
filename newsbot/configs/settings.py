"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from newsbot.configs.base import BaseSettings
from newsbot.configs.chat import ApiSettings, BackfillSettings, ChatSettings, RAGSettings
from newsbot.configs.database import DatabaseSettings
from newsbot.configs.providers import ProviderSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    providers: ProviderSettings = ProviderSettings()
    chat: ChatSettings = ChatSettings()
    rag: RAGSettings = RAGSettings()
    backfill: BackfillSettings = BackfillSettings()
    api: ApiSettings = ApiSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from newsbot.configs import get_settings
        settings = get_settings()
    """
    return Settings()
