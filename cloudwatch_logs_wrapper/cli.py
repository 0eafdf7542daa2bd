#!/usr/bin/env python3
"""
Command line entry point: dump, list and preview CloudWatch Logs.

Examples:
    cloudwatch-logs --describe-log-groups
    cloudwatch-logs --describe-log-streams -g /aws/lambda/fn
    cloudwatch-logs -g /aws/lambda/fn -s '2024/01/01/[$LATEST]abc' -o fn.log
    cloudwatch-logs --preview -g /aws/lambda/fn --stream-count 3 --fetch-count 20
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import CloudWatchLogsConfig
from .core import create_logs_gateway
from .exceptions import LogsWrapperError
from .handlers import LogCatalogReadApi, LogEventsReadApi, StreamPreviewApi
from .utils import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudwatch-logs",
        description="Fetch complete CloudWatch log streams, list groups/streams and preview recent streams"
    )
    parser.add_argument("--describe-log-groups", action="store_true", help="List all log groups")
    parser.add_argument("--describe-log-streams", action="store_true", help="List the streams of --log-group, oldest first")
    parser.add_argument("--preview", action="store_true", help="Preview the most recent streams of --log-group")
    parser.add_argument("-g", "--log-group", help="Log group name")
    parser.add_argument("-s", "--log-stream", help="Log stream name")
    parser.add_argument("-o", "--output-file", help="Write the stream text to this file instead of stdout")
    parser.add_argument("--stream-count", type=int, help="Streams to preview (default from config)")
    parser.add_argument("--fetch-count", type=int, help="Events per previewed stream (default from config)")
    parser.add_argument("--no-cache", action="store_true", help="Bypass the local content cache")
    parser.add_argument("--region", help="AWS region (overrides AWS_REGION)")
    parser.add_argument("--endpoint-url", help="CloudWatch Logs endpoint, e.g. LocalStack")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> CloudWatchLogsConfig:
    config = CloudWatchLogsConfig.from_env()
    if args.region:
        config.region_name = args.region
    if args.endpoint_url:
        config.endpoint_url = args.endpoint_url
    if args.debug:
        config.enable_debug_logging = True
    return config


def run(args: argparse.Namespace, config: CloudWatchLogsConfig) -> int:
    gateway = create_logs_gateway(config)

    if args.describe_log_groups:
        names = LogCatalogReadApi(config, gateway=gateway).list_log_groups()
        print("Log Groups:")
        for name in names:
            print(name)
        return 0

    if args.describe_log_streams or args.preview:
        if not args.log_group:
            flag = "--describe-log-streams" if args.describe_log_streams else "--preview"
            print(f"--log-group is required when using {flag}")
            return 1

    if args.describe_log_streams:
        names = LogCatalogReadApi(config, gateway=gateway).list_log_streams(args.log_group)
        print(f"Log Streams (log group: {args.log_group}):")
        for name in names:
            print(name)
        return 0

    if args.preview:
        with StreamPreviewApi(config, gateway=gateway) as previews:
            selected, texts = previews.preview_group(
                args.log_group,
                stream_count=args.stream_count,
                fetch_count=args.fetch_count
            )
        for name in selected:
            print(f"=== {name} ===")
            print(texts[name])
        return 0

    if not args.log_group or not args.log_stream:
        print("--log-group and --log-stream are required to fetch a log stream")
        return 1

    text = LogEventsReadApi(config, gateway=gateway).retrieve_text(
        args.log_group,
        args.log_stream,
        use_cache=False if args.no_cache else None
    )
    if args.output_file:
        logger.info(f"writing to file: {args.output_file}")
        Path(args.output_file).write_text(text, encoding="utf-8")
    else:
        print(text)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )
    try:
        config = _config_from_args(args)
        configure_logging(config)
        return run(args, config)
    except LogsWrapperError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
