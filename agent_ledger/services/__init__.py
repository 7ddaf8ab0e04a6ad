"""
Services module initialization.
"""

from agent_ledger.services.agent_event_query import AgentEventQueryHandler, get_agent_events

__all__ = [
    "AgentEventQueryHandler",
    "get_agent_events",
]
