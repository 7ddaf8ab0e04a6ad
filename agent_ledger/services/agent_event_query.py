"""
Agent Event Query
=================

Read-side access to agent events: all events of one workspace, optionally
narrowed by status and/or agent, most recent first.
"""

import json
import logging
from typing import Any, Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from agent_ledger.models.agent_event import AgentEvent
from agent_ledger.schemas.agent_event import AgentEventResponse, GetAgentEventsQuery

logger = logging.getLogger(__name__)


def _load_json(value: Any) -> Optional[Any]:
    """Decode a JSON column that the driver handed back as text."""
    if isinstance(value, (str, bytes, bytearray)):
        return json.loads(value)
    return value


class AgentEventQueryHandler:
    """
    Fetches agent events for a workspace.

    The handler never opens, commits or closes the session it is given;
    transaction scope belongs to the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch(self, query: GetAgentEventsQuery) -> list[AgentEventResponse]:
        """
        Return the workspace's events matching the optional filters.

        Args:
            query: Workspace id plus optional status/agent equality filters

        Returns:
            Events ordered by created_at descending (id descending on ties).
            Empty when nothing matches.

        Raises:
            Whatever the storage layer raised, unchanged, after logging it.
        """
        try:
            conditions = [AgentEvent.workspace_id == query.workspace_id]

            if query.status:
                conditions.append(AgentEvent.status == query.status)
            if query.agent:
                conditions.append(AgentEvent.agent == query.agent)

            stmt = (
                select(AgentEvent)
                .where(conditions[0] if len(conditions) == 1 else and_(*conditions))
                .order_by(AgentEvent.created_at.desc(), AgentEvent.id.desc())
            )

            res = await self.session.execute(stmt)
            events = res.scalars().all()

            return [
                AgentEventResponse(
                    id=e.id,
                    workspace_id=e.workspace_id,
                    agent=e.agent,
                    action=e.action,
                    input=_load_json(e.input) or {},
                    output=_load_json(e.output),
                    status=e.status,
                    created_at=e.created_at,
                )
                for e in events
            ]
        except Exception as e:
            logger.error(f"Failed to fetch agent events: {e}")
            raise


async def get_agent_events(session: AsyncSession, query: GetAgentEventsQuery) -> list[AgentEventResponse]:
    """Shorthand for ``AgentEventQueryHandler(session).fetch(query)``."""
    return await AgentEventQueryHandler(session).fetch(query)
