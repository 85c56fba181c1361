"""
Session log backends.

Exports:
  - SessionLog: Contract and shared validation/serialization
  - SqlSessionLog: Relational backend (default)
  - MemorySessionLog: List-backed in-memory backend
"""

from newsbot.boundary.session_log.base import SessionLog, SessionLocks
from newsbot.boundary.session_log.memory_session_log import MemorySessionLog
from newsbot.boundary.session_log.sql_session_log import SqlSessionLog

__all__ = ["SessionLog", "SessionLocks", "MemorySessionLog", "SqlSessionLog"]
