"""
Log Catalog Read API

Listing of log groups and log streams with bounded pagination.

Usage:
    from .queries import LogCatalogReadApi

    catalog = LogCatalogReadApi(config)
    groups = catalog.list_log_groups()
    streams = catalog.list_log_streams(groups[0])
"""

from .queries import LogCatalogReadApi

__all__ = [
    "LogCatalogReadApi",
]
