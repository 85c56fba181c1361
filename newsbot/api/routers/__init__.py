"""
API routers.

Dependencies: fastapi
System role: HTTP and WebSocket route definitions
"""

from .articles import router as articles_router
from .chat import router as chat_router
from .chat_stream import router as chat_stream_router
from .health import router as health_router
from .sessions import router as sessions_router

__all__ = [
    "articles_router",
    "chat_router",
    "chat_stream_router",
    "health_router",
    "sessions_router",
]
