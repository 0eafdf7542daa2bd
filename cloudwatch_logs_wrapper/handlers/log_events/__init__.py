"""
Log Events Read API

Full, ordered retrieval of a single log stream with optional caching.

Usage:
    from .queries import LogEventsReadApi

    api = LogEventsReadApi(config)
    events = api.retrieve("/aws/lambda/fn", "2024/01/01/[$LATEST]abc")
"""

from .queries import LogEventsReadApi

__all__ = [
    "LogEventsReadApi",
]
