"""Agent event schemas.

The query descriptor accepted by the agent event query handler and the
projection it returns.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from agent_ledger.models.agent_event import AgentEventStatus
from agent_ledger.schemas.base import BaseSchema


class GetAgentEventsQuery(BaseSchema):
    workspace_id: str = Field(..., min_length=1, description="Workspace to read events from")
    status: Optional[AgentEventStatus] = Field(default=None, description="Only events with this status")
    agent: Optional[str] = Field(default=None, max_length=100, description="Only events from this agent")

    @field_validator("agent", mode="before")
    @classmethod
    def blank_agent_is_no_filter(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CreateAgentEventInput(BaseSchema):
    workspace_id: str = Field(..., min_length=1)
    agent: str = Field(..., min_length=1, max_length=100)
    action: str = Field(..., min_length=1, max_length=100)
    input: dict[str, Any] = Field(default_factory=dict)
    output: Optional[dict[str, Any]] = Field(default_factory=dict)
    status: AgentEventStatus = AgentEventStatus.DRAFT


class AgentEventResponse(BaseSchema):
    id: str
    workspace_id: str
    agent: str
    action: str
    input: dict[str, Any]
    output: Optional[dict[str, Any]] = None
    status: AgentEventStatus
    created_at: datetime
