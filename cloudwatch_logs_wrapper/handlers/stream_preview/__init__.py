"""
Stream Preview Read API

Concurrent single-page previews of the most recent streams of a group.

Usage:
    from .queries import StreamPreviewApi

    with StreamPreviewApi(config) as previews:
        names, texts = previews.preview_group("/aws/lambda/fn", stream_count=3)
"""

from .queries import StreamPreviewApi, select_recent

__all__ = [
    "StreamPreviewApi",
    "select_recent",
]
