"""
Thin CloudWatch Logs Gateway

This module provides a lightweight wrapper around the boto3 ``logs`` client.
Each method issues exactly one request and returns one page; looping over
tokens is left to the read APIs in ``handlers/``:

- GetLogEvents      -> LogsGateway.get_log_events      (page fetcher)
- DescribeLogGroups -> LogsGateway.describe_log_groups (listing fetcher)
- DescribeLogStreams-> LogsGateway.describe_log_streams(listing fetcher)

The gateway focuses on:
- Creating the boto3 client lazily from configuration
- Parsing responses into models
- Mapping botocore errors to domain exceptions

No retries are added here beyond botocore's own configured retry count.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import CloudWatchLogsConfig
from ..exceptions import TransportError
from ..models import LogGroupSummary, LogPage, LogStreamSummary

logger = logging.getLogger(__name__)


def map_logs_error(
    error: ClientError,
    operation: str,
    resource_id: Optional[str] = None
) -> TransportError:
    """Map a CloudWatch Logs ClientError to a TransportError.

    The upstream message is kept verbatim; the error code is recorded on the
    exception and in its context.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetLogEvents")
        resource_id: Optional log group or stream for context

    Returns:
        TransportError describing the failure
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    context = operation
    if resource_id:
        context += f" on {resource_id}"

    full_message = f"{context}: {error_message}"
    error_context = {'operation': operation}
    if resource_id:
        error_context['resource'] = resource_id

    if error_code == 'ResourceNotFoundException':
        description = "Log group or stream not found"
    elif error_code in ['AccessDeniedException', 'UnrecognizedClientException']:
        description = "Authentication/authorization failed"
    elif error_code in ['ExpiredTokenException', 'ExpiredToken', 'InvalidSignatureException']:
        description = "Credentials expired or invalid"
    elif error_code in ['InvalidParameterException', 'ValidationException']:
        description = "Invalid request parameters"
    elif error_code in ['ThrottlingException', 'LimitExceededException', 'TooManyRequestsException']:
        description = "Throttling/rate limiting"
    elif error_code in ['ServiceUnavailableException', 'InternalFailure', 'ServiceUnavailable']:
        description = "Service unavailable"
    else:
        logger.warning(f"Unknown CloudWatch Logs error code '{error_code}' mapped to TransportError")
        description = "CloudWatch Logs operation failed"

    return TransportError(f"{description} - {full_message}", error, error_context, error_code)


class LogsGateway:
    """
    Thin gateway for CloudWatch Logs operations.

    Provides single-request building blocks used by the read APIs. The
    boto3 client is created on first use and reused afterwards; boto3
    clients are thread-safe, so the preview fan-out shares one gateway.
    """

    def __init__(self, config: CloudWatchLogsConfig):
        """Initialize logs gateway.

        Args:
            config: CloudWatch Logs configuration
        """
        self.config = config
        self._client = None
        self._client_lock = threading.Lock()

    @property
    def client(self):
        """Lazy initialization of the CloudWatch Logs client.

        Guarded by a lock so preview worker threads sharing a fresh gateway
        build a single client.
        """
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = self._create_client()
        return self._client

    def _create_client(self):
        try:
            session = boto3.Session(
                aws_access_key_id=self.config.aws_access_key_id,
                aws_secret_access_key=self.config.aws_secret_access_key,
                aws_session_token=self.config.aws_session_token,
                profile_name=self.config.profile_name,
                region_name=self.config.region_name
            )

            client_config = {
                'region_name': self.config.region_name
            }

            if self.config.endpoint_url:
                client_config['endpoint_url'] = self.config.endpoint_url

            # Add retry and timeout configuration
            boto_config = Config(
                retries={'max_attempts': self.config.retries},
                max_pool_connections=self.config.max_pool_connections,
                read_timeout=self.config.timeout_seconds,
                connect_timeout=self.config.timeout_seconds
            )
            client_config['config'] = boto_config

            return session.client('logs', **client_config)
        except Exception as e:
            logger.error(f"Failed to create CloudWatch Logs client: {e}")
            raise TransportError(f"Failed to connect to CloudWatch Logs: {e}", e) from e

    def _call(self, operation: str, method: str, resource_id: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        try:
            return getattr(self.client, method)(**kwargs)
        except ClientError as e:
            raise map_logs_error(e, operation, resource_id) from e
        except BotoCoreError as e:
            logger.error(f"{operation} failed: {e}")
            context = {'operation': operation}
            if resource_id:
                context['resource'] = resource_id
            raise TransportError(f"{operation} failed: {e}", e, context) from e

    def get_log_events(
        self,
        log_group: str,
        log_stream: str,
        next_token: Optional[str] = None,
        limit: Optional[int] = None,
        start_from_head: bool = True
    ) -> LogPage:
        """
        Fetch one window of a log stream.

        Args:
            log_group: Log group name
            log_stream: Log stream name
            next_token: Token from a previous page (None for the first page)
            limit: Maximum events to return (API maximum 10000)
            start_from_head: Read oldest events first on the initial request

        Returns:
            LogPage with events and forward/backward tokens

        Example:
            page = gateway.get_log_events('/aws/lambda/fn', '2024/01/01/[$LATEST]abc', limit=100)
        """
        request = {
            'logGroupName': log_group,
            'logStreamName': log_stream,
            'startFromHead': start_from_head,
        }
        if limit is not None:
            request['limit'] = limit
        if next_token is not None:
            request['nextToken'] = next_token

        logger.debug(f"GetLogEvents request: {request}")
        response = self._call('GetLogEvents', 'get_log_events', f"{log_group}/{log_stream}", **request)
        return LogPage.from_api_item(response)

    def describe_log_groups(
        self,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> Tuple[List[LogGroupSummary], Optional[str]]:
        """
        Fetch one page of log groups.

        Returns:
            Tuple of (log_groups, next_token); next_token is None on the last page
        """
        request = {}
        if next_token is not None:
            request['nextToken'] = next_token
        if limit is not None:
            request['limit'] = limit

        response = self._call('DescribeLogGroups', 'describe_log_groups', **request)
        groups = [LogGroupSummary.from_api_item(item) for item in response.get('logGroups', [])]
        return groups, response.get('nextToken')

    def describe_log_streams(
        self,
        log_group: str,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> Tuple[List[LogStreamSummary], Optional[str]]:
        """
        Fetch one page of the log streams of a group.

        Returns:
            Tuple of (log_streams, next_token); next_token is None on the last page
        """
        request = {'logGroupName': log_group}
        if next_token is not None:
            request['nextToken'] = next_token
        if limit is not None:
            request['limit'] = limit

        response = self._call('DescribeLogStreams', 'describe_log_streams', log_group, **request)
        streams = [LogStreamSummary.from_api_item(item) for item in response.get('logStreams', [])]
        return streams, response.get('nextToken')

    def verify_connectivity(self) -> None:
        """
        Check that credentials and endpoint work by listing a single log group.

        Raises:
            TransportError: If the request fails
        """
        self.describe_log_groups(limit=1)
        logger.info(f"CloudWatch Logs reachable in {self.config.region_name}")


def create_logs_gateway(config: CloudWatchLogsConfig) -> LogsGateway:
    """
    Factory function to create a LogsGateway instance.

    Args:
        config: CloudWatch Logs configuration

    Returns:
        Configured LogsGateway instance
    """
    return LogsGateway(config)
