"""
Test configuration and fixtures for the CloudWatch Logs wrapper.

Provides configuration fixtures, an in-memory CloudWatch Logs (moto) seeded
with a log group and streams, and LocalStack fixtures for integration tests.
"""

import sys
import time
from pathlib import Path
from typing import Generator

# Add parent directory to path so we can import cloudwatch_logs_wrapper
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
import requests
from moto import mock_aws

from cloudwatch_logs_wrapper import CloudWatchLogsConfig
from tests.helpers import TEST_LOG_GROUP, TEST_STREAMS


@pytest.fixture
def logs_config(tmp_path):
    """CloudWatch Logs configuration for testing with an isolated cache dir."""
    return CloudWatchLogsConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        aws_session_token=None,
        profile_name=None,
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        cache_enabled=True,
        cache_dir=str(tmp_path / "aws_log_cache"),
        preview_fetch_count=10,
        preview_stream_count=3,
        preview_concurrency=4,
        enable_debug_logging=False
    )


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def mock_logs_client(aws_credentials):
    """Mock CloudWatch Logs client."""
    with mock_aws():
        yield boto3.client('logs', region_name='us-east-1')


@pytest.fixture
def seeded_log_group(mock_logs_client):
    """Create a log group with three streams of five events each.

    Returns a dict of stream name -> list of messages in timestamp order.
    """
    mock_logs_client.create_log_group(logGroupName=TEST_LOG_GROUP)
    base = int(time.time() * 1000) - 60_000
    contents = {}
    for stream_index, stream in enumerate(TEST_STREAMS):
        mock_logs_client.create_log_stream(logGroupName=TEST_LOG_GROUP, logStreamName=stream)
        messages = [f"  {stream} line {i}  " for i in range(5)]
        mock_logs_client.put_log_events(
            logGroupName=TEST_LOG_GROUP,
            logStreamName=stream,
            logEvents=[
                {'timestamp': base + stream_index * 1000 + i, 'message': message}
                for i, message in enumerate(messages)
            ]
        )
        contents[stream] = messages
    return contents


# ===== LocalStack Integration Test Fixtures =====

LOCALSTACK_HEALTH_URL = "http://localhost:4566/_localstack/health"


@pytest.fixture(scope="session")
def localstack_available() -> Generator[None, None, None]:
    """Skip integration tests unless LocalStack's logs service is up."""
    try:
        response = requests.get(LOCALSTACK_HEALTH_URL, timeout=2)
    except (requests.RequestException, requests.ConnectionError):
        pytest.skip("LocalStack is not running on localhost:4566")
    if response.status_code != 200:
        pytest.skip(f"LocalStack health check returned {response.status_code}")
    status = response.json().get("services", {}).get("logs", "")
    if status not in ["available", "running"]:
        pytest.skip(f"LocalStack logs service not available (status: {status!r})")
    yield


@pytest.fixture
def localstack_config(localstack_available, tmp_path):
    """CloudWatch Logs configuration for LocalStack integration testing."""
    config = CloudWatchLogsConfig.for_local_development()
    config.profile_name = None
    config.aws_session_token = None
    config.cache_dir = str(tmp_path / "aws_log_cache")
    return config


@pytest.fixture
def localstack_logs_client(localstack_available):
    """LocalStack CloudWatch Logs client for integration testing."""
    return boto3.client(
        'logs',
        region_name='us-east-1',
        endpoint_url='http://localhost:4566',
        aws_access_key_id='test',
        aws_secret_access_key='test'
    )
