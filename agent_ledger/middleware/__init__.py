"""
Middleware package.
"""

from agent_ledger.middleware.request_id import RequestIdMiddleware
from agent_ledger.middleware.request_logger import RequestLoggerMiddleware

__all__ = [
    "RequestIdMiddleware",
    "RequestLoggerMiddleware",
]
