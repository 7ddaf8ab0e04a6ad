"""Core module initialization."""

from agent_ledger.core.config import settings, get_settings
from agent_ledger.core.database import engine, async_session_factory, get_db
from agent_ledger.core.logging import configure_logging

__all__ = [
    "settings",
    "get_settings",
    "engine",
    "async_session_factory",
    "get_db",
    "configure_logging",
]
