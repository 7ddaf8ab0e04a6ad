"""Agent event endpoints.

Read-only HTTP access to a workspace's agent events.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from agent_ledger.core.database import get_db
from agent_ledger.models.agent_event import AgentEventStatus
from agent_ledger.schemas.agent_event import AgentEventResponse, GetAgentEventsQuery
from agent_ledger.services.agent_event_query import AgentEventQueryHandler


router = APIRouter()


@router.get("/workspaces/{workspace_id}/agent-events", response_model=list[AgentEventResponse])
async def list_agent_events(
    workspace_id: str,
    status_filter: AgentEventStatus | None = Query(default=None, alias="status", description="Filter by status"),
    agent: str | None = Query(default=None, max_length=100, description="Filter by agent"),
    db: AsyncSession = Depends(get_db),
):
    try:
        query = GetAgentEventsQuery(workspace_id=workspace_id, status=status_filter, agent=agent)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e
    return await AgentEventQueryHandler(db).fetch(query)
