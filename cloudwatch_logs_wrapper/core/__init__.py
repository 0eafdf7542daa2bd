"""
Core infrastructure components for CloudWatch Logs operations.

This module contains the foundational components used by every read API:
- LogsGateway: Thin wrapper over the boto3 logs client (one request per call)
- PageCursor: Explicit pagination state shared by the paging loops
- Factory functions for creating gateways
"""

from .cursor import CursorState, PageCursor
from .logs_gateway import LogsGateway, create_logs_gateway, map_logs_error

__all__ = [
    "CursorState",
    "PageCursor",
    "LogsGateway",
    "create_logs_gateway",
    "map_logs_error",
]
