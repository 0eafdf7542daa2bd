"""
Tests for the command line entry point (cli.py)
"""

import pytest
from unittest.mock import patch

from cloudwatch_logs_wrapper import cli
from cloudwatch_logs_wrapper.exceptions import PageFetchError
from tests.helpers import TEST_LOG_GROUP, TEST_STREAMS


@pytest.fixture
def cli_config(logs_config):
    with patch.object(cli.CloudWatchLogsConfig, 'from_env', return_value=logs_config):
        yield logs_config


class TestArguments:

    def test_short_flags(self):
        args = cli.build_parser().parse_args(["-g", "grp", "-s", "stream", "-o", "out.log"])

        assert args.log_group == "grp"
        assert args.log_stream == "stream"
        assert args.output_file == "out.log"
        assert not args.describe_log_groups

    def test_overrides_applied_to_config(self, cli_config):
        args = cli.build_parser().parse_args(["--region", "eu-west-1", "--endpoint-url", "http://localhost:4566", "--debug"])

        config = cli._config_from_args(args)

        assert config.region_name == "eu-west-1"
        assert config.endpoint_url == "http://localhost:4566"
        assert config.enable_debug_logging is True


class TestMissingArguments:

    def test_malformed_env_config_exits_non_zero(self, monkeypatch, capsys):
        monkeypatch.setenv("CLOUDWATCH_LOGS_PREVIEW_FETCH_COUNT", "fifty")

        assert cli.main(["--describe-log-groups"]) == 1
        assert capsys.readouterr().out == ""

    def test_fetch_requires_group_and_stream(self, cli_config, capsys):
        assert cli.main(["-g", "grp"]) == 1
        assert "--log-group and --log-stream are required" in capsys.readouterr().out

    @pytest.mark.parametrize("flag", ["--describe-log-streams", "--preview"])
    def test_group_required(self, cli_config, capsys, flag):
        assert cli.main([flag]) == 1
        assert f"--log-group is required when using {flag}" in capsys.readouterr().out


class TestCommands:

    def test_describe_log_groups(self, cli_config, capsys):
        with patch.object(cli.LogCatalogReadApi, 'list_log_groups', return_value=["/a", "/b"]):
            assert cli.main(["--describe-log-groups"]) == 0

        assert capsys.readouterr().out == "Log Groups:\n/a\n/b\n"

    def test_describe_log_streams(self, cli_config, capsys):
        with patch.object(cli.LogCatalogReadApi, 'list_log_streams', return_value=["old", "new"]) as listing:
            assert cli.main(["--describe-log-streams", "-g", "grp"]) == 0

        listing.assert_called_once_with("grp")
        assert capsys.readouterr().out == "Log Streams (log group: grp):\nold\nnew\n"

    def test_preview(self, cli_config, capsys):
        result = (["new", "old"], {"new": "n1\nn2", "old": "o1"})
        with patch.object(cli.StreamPreviewApi, 'preview_group', return_value=result) as preview_group:
            assert cli.main(["--preview", "-g", "grp", "--stream-count", "2", "--fetch-count", "9"]) == 0

        preview_group.assert_called_once_with("grp", stream_count=2, fetch_count=9)
        assert capsys.readouterr().out == "=== new ===\nn1\nn2\n=== old ===\no1\n"

    def test_fetch_to_stdout(self, cli_config, capsys):
        with patch.object(cli.LogEventsReadApi, 'retrieve_text', return_value="line 1\nline 2") as retrieve_text:
            assert cli.main(["-g", "grp", "-s", "stream"]) == 0

        retrieve_text.assert_called_once_with("grp", "stream", use_cache=None)
        assert capsys.readouterr().out == "line 1\nline 2\n"

    def test_fetch_to_file_without_cache(self, cli_config, capsys, tmp_path):
        output = tmp_path / "out.log"
        with patch.object(cli.LogEventsReadApi, 'retrieve_text', return_value="text") as retrieve_text:
            assert cli.main(["-g", "grp", "-s", "stream", "-o", str(output), "--no-cache"]) == 0

        retrieve_text.assert_called_once_with("grp", "stream", use_cache=False)
        assert output.read_text(encoding="utf-8") == "text"
        assert capsys.readouterr().out == ""

    def test_wrapper_error_exits_non_zero(self, cli_config, capsys):
        with patch.object(cli.LogEventsReadApi, 'retrieve_text', side_effect=PageFetchError("failed to fetch single page of logs: boom")):
            assert cli.main(["-g", "grp", "-s", "stream"]) == 1

        assert capsys.readouterr().out == ""

    def test_reserved_stream_name_exits_non_zero(self, cli_config):
        assert cli.main(["-g", "grp", "-s", "/leading-slash"]) == 1


class TestAgainstMoto:

    def test_fetch_stream(self, cli_config, seeded_log_group, capsys):
        assert cli.main(["-g", TEST_LOG_GROUP, "-s", TEST_STREAMS[0]]) == 0

        expected = "\n".join(message.strip() for message in seeded_log_group[TEST_STREAMS[0]])
        assert capsys.readouterr().out == expected + "\n"
