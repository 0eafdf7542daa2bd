"""
LocalStack Integration Tests for the CloudWatch Logs Wrapper

These tests exercise the read APIs against CloudWatch Logs running in
LocalStack, covering real paging tokens and service-side error codes that
moto only approximates.

Key testing scenarios:
1. Full retrieval of a stream spanning many pages
2. Group and stream enumeration
3. Concurrent previews of the newest streams
4. Error codes for missing streams

Skipped automatically when LocalStack is not reachable on localhost:4566.
"""

import time
import uuid

import pytest

from cloudwatch_logs_wrapper import (
    LogCatalogReadApi,
    LogEventsReadApi,
    PageFetchError,
    StreamPreviewApi,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def populated_group(localstack_logs_client):
    """Create a uniquely named group with three streams, removed afterwards."""
    group = f"/integration/{uuid.uuid4().hex[:8]}"
    localstack_logs_client.create_log_group(logGroupName=group)

    base = int(time.time() * 1000) - 120_000
    streams = {}
    for index in range(3):
        stream = f"2024/01/0{index + 1}/[$LATEST]{uuid.uuid4().hex[:6]}"
        localstack_logs_client.create_log_stream(logGroupName=group, logStreamName=stream)
        messages = [f"stream {index} event {i}" for i in range(25)]
        localstack_logs_client.put_log_events(
            logGroupName=group,
            logStreamName=stream,
            logEvents=[{'timestamp': base + i, 'message': message} for i, message in enumerate(messages)]
        )
        streams[stream] = messages
        # distinct creation times
        time.sleep(0.01)

    yield group, streams

    localstack_logs_client.delete_log_group(logGroupName=group)


class TestLocalStackRetrieval:

    def test_full_retrieval_across_pages(self, localstack_config, populated_group):
        group, streams = populated_group
        localstack_config.page_limit = 4
        stream, messages = next(iter(streams.items()))

        events = LogEventsReadApi(localstack_config).retrieve(group, stream, use_cache=False)

        assert [event.message for event in events] == messages

    def test_cached_text_matches_fresh_text(self, localstack_config, populated_group):
        group, streams = populated_group
        stream = list(streams)[1]
        api = LogEventsReadApi(localstack_config)

        fresh = api.retrieve_text(group, stream)
        cached = api.retrieve_text(group, stream)

        assert fresh == cached == "\n".join(streams[stream])

    def test_missing_stream(self, localstack_config, populated_group):
        group, _ = populated_group

        with pytest.raises(PageFetchError) as exc_info:
            LogEventsReadApi(localstack_config).retrieve(group, "no-such-stream", use_cache=False)

        assert exc_info.value.error_code == 'ResourceNotFoundException'


class TestLocalStackCatalog:

    def test_group_is_listed(self, localstack_config, populated_group):
        group, _ = populated_group

        names = LogCatalogReadApi(localstack_config).list_log_groups()

        assert group in names
        assert names == sorted(names)

    def test_streams_listed_oldest_first(self, localstack_config, populated_group):
        group, streams = populated_group

        names = LogCatalogReadApi(localstack_config).list_log_streams(group)

        assert names == list(streams)


class TestLocalStackPreview:

    def test_preview_newest_streams(self, localstack_config, populated_group):
        group, streams = populated_group
        newest_first = list(reversed(list(streams)))

        with StreamPreviewApi(localstack_config) as api:
            selected, previews = api.preview_group(group, stream_count=2, fetch_count=5)

        assert selected == newest_first[:2]
        for name in selected:
            assert previews[name] == "\n".join(streams[name][:5])
