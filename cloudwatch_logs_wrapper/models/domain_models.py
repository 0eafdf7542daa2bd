"""
Domain Models for the CloudWatch Logs Wrapper

Organized by domain:
1. Stream Identity
2. Log Events and Pages (GetLogEvents)
3. Catalog Entries (DescribeLogGroups / DescribeLogStreams)

Events are immutable once received. Duplicates are never removed; ordering
is defined by ``timestamp`` alone, with ties kept in arrival order.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .base import CloudWatchMixin, WIRE_MODEL_CONFIG


# =============================================================================
# Stream Identity
# =============================================================================

class StreamIdentity(BaseModel):
    """
    Identifies one log stream: (log group, log stream).

    Both parts are opaque upstream identifiers. A stream name starting with
    the reserved prefix is rejected by ``validate_for_retrieval`` before any
    request is issued.
    """

    log_group: str = Field(..., description="CloudWatch log group name")
    log_stream: str = Field(..., description="CloudWatch log stream name")

    model_config = WIRE_MODEL_CONFIG

    def validate_for_retrieval(self, reserved_prefix: str = "/") -> "StreamIdentity":
        """
        Check the identity can be used to address a stream.

        Args:
            reserved_prefix: Prefix stream names must not start with

        Returns:
            self, for chaining

        Raises:
            PreconditionError: If the group or stream is empty, or the stream
                name starts with the reserved prefix
        """
        from ..exceptions import PreconditionError

        if not self.log_group:
            raise PreconditionError("log_group must not be empty", self.log_group, self.log_stream)
        if not self.log_stream:
            raise PreconditionError("log_stream must not be empty", self.log_group, self.log_stream)
        if reserved_prefix and self.log_stream.startswith(reserved_prefix):
            raise PreconditionError(
                f"log_stream should probably not begin with {reserved_prefix!r} -> {self.log_stream}",
                self.log_group,
                self.log_stream
            )
        return self

    def __str__(self) -> str:
        return f"{self.log_group}:{self.log_stream}"


# =============================================================================
# Log Events and Pages
# =============================================================================

class LogEvent(CloudWatchMixin, BaseModel):
    """A single log event as returned by GetLogEvents."""

    timestamp: int = Field(..., description="Event time in milliseconds since the epoch")
    message: str = Field(..., description="Raw event text")
    ingestion_time: int = Field(0, alias="ingestionTime", description="Ingestion time in milliseconds since the epoch")

    model_config = WIRE_MODEL_CONFIG


class LogPage(CloudWatchMixin, BaseModel):
    """
    One GetLogEvents response window.

    A page with no events is the normal end-of-stream signal. Tokens are
    compared for equality only; an empty string is a valid token.
    """

    events: List[LogEvent] = Field(default_factory=list, description="Events in this window")
    next_forward_token: Optional[str] = Field(None, alias="nextForwardToken", description="Token for the next (newer) window")
    next_backward_token: Optional[str] = Field(None, alias="nextBackwardToken", description="Token for the previous (older) window")

    model_config = WIRE_MODEL_CONFIG

    @property
    def is_empty(self) -> bool:
        return not self.events


# =============================================================================
# Catalog Entries
# =============================================================================

class LogGroupSummary(CloudWatchMixin, BaseModel):
    """Entry of a DescribeLogGroups response."""

    log_group_name: str = Field(..., alias="logGroupName")
    creation_time: Optional[int] = Field(None, alias="creationTime")
    stored_bytes: Optional[int] = Field(None, alias="storedBytes")

    model_config = WIRE_MODEL_CONFIG


class LogStreamSummary(CloudWatchMixin, BaseModel):
    """Entry of a DescribeLogStreams response.

    ``creation_time`` is the secondary ordering key used when listing the
    streams of a group oldest first.
    """

    log_stream_name: str = Field(..., alias="logStreamName")
    creation_time: Optional[int] = Field(None, alias="creationTime")
    first_event_timestamp: Optional[int] = Field(None, alias="firstEventTimestamp")
    last_event_timestamp: Optional[int] = Field(None, alias="lastEventTimestamp")

    model_config = WIRE_MODEL_CONFIG

    @field_validator('log_stream_name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError("logStreamName must not be empty")
        return v
