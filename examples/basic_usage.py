#!/usr/bin/env python3
"""
Basic usage examples for the CloudWatch Logs wrapper.

This example walks through the read APIs:
1. Setting up configuration
2. Listing log groups and the streams of a group
3. Retrieving a complete stream (cached on disk after the first call)
4. Previewing the most recent streams of a group concurrently
"""

import sys

from cloudwatch_logs_wrapper import (
    CloudWatchLogsConfig,
    LogCatalogReadApi,
    LogEventsReadApi,
    LogsWrapperError,
    StreamPreviewApi,
    create_logs_gateway,
)


def main(log_group: str):
    """Demonstrate basic usage of the CloudWatch Logs wrapper."""

    # 1. Configure the CloudWatch Logs connection
    print("1. Setting up CloudWatch Logs configuration...")
    config = CloudWatchLogsConfig.from_env()  # Uses environment variables

    # For LocalStack, you might use:
    # config = CloudWatchLogsConfig.for_local_development()

    # 2. Initialize read APIs sharing one gateway (one boto3 client)
    print("2. Initializing read APIs...")
    gateway = create_logs_gateway(config)
    catalog = LogCatalogReadApi(config, gateway=gateway)
    events_api = LogEventsReadApi(config, gateway=gateway)

    # 3. List groups and streams
    print("3. Listing log groups...")
    groups = catalog.list_log_groups()
    print(f"   {len(groups)} log groups")

    streams = catalog.list_log_streams(log_group)
    print(f"   {len(streams)} streams in {log_group} (oldest first)")
    if not streams:
        return

    # 4. Retrieve the newest stream in full
    newest = streams[-1]
    print(f"4. Retrieving {newest}...")
    events = events_api.retrieve(log_group, newest)
    print(f"   {len(events)} events")
    if events:
        print(f"   first: {events[0].message.strip()}")
        print(f"   last:  {events[-1].message.strip()}")

    # A second call is served from the local cache without any request
    events_api.retrieve_text(log_group, newest)

    # 5. Preview the three newest streams, 10 events each
    print("5. Previewing recent streams...")
    with StreamPreviewApi(config, gateway=gateway, catalog=catalog) as previews:
        selected, texts = previews.preview_group(log_group, stream_count=3, fetch_count=10)
    for name in selected:
        print(f"=== {name} ===")
        print(texts[name])


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: basic_usage.py LOG_GROUP")
        sys.exit(1)
    try:
        main(sys.argv[1])
    except LogsWrapperError as e:
        print(f"Error: {e}")
        sys.exit(1)
