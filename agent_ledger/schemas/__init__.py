"""
Pydantic schemas for request validation and response serialization.
"""

from agent_ledger.schemas.base import BaseSchema
from agent_ledger.schemas.agent_event import (
    AgentEventResponse,
    CreateAgentEventInput,
    GetAgentEventsQuery,
)

__all__ = [
    "BaseSchema",
    "AgentEventResponse",
    "CreateAgentEventInput",
    "GetAgentEventsQuery",
]
