"""
Database Models
===============

SQLAlchemy models for users, workspaces and the agent events they scope.
"""

from agent_ledger.models.base import (
    Base,
    TimestampMixin,
    UUIDMixin,
    generate_uuid,
)
from agent_ledger.models.user import User
from agent_ledger.models.workspace import Workspace
from agent_ledger.models.agent_event import AgentEvent, AgentEventStatus

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "generate_uuid",
    "User",
    "Workspace",
    "AgentEvent",
    "AgentEventStatus",
]
