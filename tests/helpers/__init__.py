"""
Test helpers for the CloudWatch Logs wrapper.

Builders for events and pages, a scripted gateway double that replays a
fixed page sequence, and ClientError factories.
"""

import threading
import time
from typing import Dict, List, Optional, Sequence, Tuple
from unittest.mock import Mock

from botocore.exceptions import ClientError

from cloudwatch_logs_wrapper.core import LogsGateway
from cloudwatch_logs_wrapper.models import LogEvent, LogPage, LogStreamSummary

TEST_LOG_GROUP = "/aws/lambda/test-fn"
TEST_STREAMS = [
    "2024/01/01/[$LATEST]aaa",
    "2024/01/02/[$LATEST]bbb",
    "2024/01/03/[$LATEST]ccc",
]


def make_event(timestamp: int, message: str, ingestion_time: Optional[int] = None) -> LogEvent:
    return LogEvent(
        timestamp=timestamp,
        message=message,
        ingestion_time=timestamp + 5 if ingestion_time is None else ingestion_time
    )


def make_page(events: Sequence[LogEvent], forward: Optional[str], backward: Optional[str] = "b/0") -> LogPage:
    return LogPage(events=list(events), next_forward_token=forward, next_backward_token=backward)


def make_client_error(code: str, message: str = "boom", operation: str = "GetLogEvents") -> ClientError:
    return ClientError(
        error_response={'Error': {'Code': code, 'Message': message}},
        operation_name=operation
    )


def scripted_gateway(pages: Sequence[LogPage]) -> Mock:
    """Gateway double whose get_log_events returns ``pages`` in order."""
    gateway = Mock(spec=LogsGateway)
    gateway.get_log_events.side_effect = list(pages)
    return gateway


def stream_summary(name: str, creation_time: Optional[int]) -> LogStreamSummary:
    return LogStreamSummary(log_stream_name=name, creation_time=creation_time)


class ConcurrencyProbe:
    """Records the peak number of concurrent get_log_events calls.

    Each call sleeps briefly while holding an in-flight slot so overlapping
    calls are observable.
    """

    def __init__(self, pages_by_stream: Dict[str, LogPage], delay: float = 0.05):
        self.pages_by_stream = pages_by_stream
        self.delay = delay
        self.in_flight = 0
        self.peak = 0
        self.calls: List[Tuple[str, str, Optional[int]]] = []
        self._lock = threading.Lock()

    def __call__(self, log_group, log_stream, next_token=None, limit=None, start_from_head=True):
        with self._lock:
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
            self.calls.append((log_group, log_stream, limit))
        try:
            time.sleep(self.delay)
            return self.pages_by_stream[log_stream]
        finally:
            with self._lock:
                self.in_flight -= 1
