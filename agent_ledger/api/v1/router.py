"""
API v1 Router
=============

Main router that combines all API v1 endpoints.
"""

from fastapi import APIRouter

from agent_ledger.api.v1.endpoints import agent_events

api_router = APIRouter()

api_router.include_router(
    agent_events.router,
    tags=["Agent Events"],
)
