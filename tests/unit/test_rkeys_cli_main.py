"""Unit tests for the rkeys CLI entry point."""

import importlib
import json
from unittest.mock import patch

import pytest

from rkeys.api.store.StoreConnectionError import StoreConnectionError
from rkeys.cli import main

pytestmark = pytest.mark.cli


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    """Keep main() from attaching a file handler for the whole test session."""
    module = importlib.import_module("rkeys.utils.configure_logging")
    monkeypatch.setattr(module, "_CONFIGURED", True)


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("rkeys ")


def test_list_yaml(rkeys_home, fake_redis, capsys):
    fake_redis.set("user:1", "x")

    assert main(["keys", "list", "user:*"]) == 0

    captured = capsys.readouterr()
    assert "- user:1" in captured.out
    assert "Found 1 key(s)" in captured.err


def test_get_json(rkeys_home, fake_redis, capsys):
    fake_redis.set("cfg:a", "1")

    assert main(["--display", "json", "keys", "get", "cfg:*"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["values"] == [{"key": "cfg:a", "value": "1"}]


def test_json_output_escapes_undecodable_keys(rkeys_home, fake_redis, capsys):
    fake_redis.set(b"bin:\xff", "x")

    assert main(["--display", "json", "keys", "list", "bin:*"]) == 0

    out = capsys.readouterr().out
    assert "bin:\\udcff" in out
    assert json.loads(out)["keys"] == ["bin:\udcff"]


def test_delete_dry_run_leaves_keys(rkeys_home, fake_redis, capsys):
    fake_redis.set("tmp:1", "x")

    assert main(["-d", "json", "keys", "delete", "tmp:*"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["matched_count"] == 1
    assert output["deleted_count"] == 0
    assert fake_redis.exists("tmp:1") == 1


def test_stats_table(rkeys_home, fake_redis, capsys):
    for key in ("user:1", "user:2", "x"):
        fake_redis.set(key, "x")

    assert main(["keys", "stats", "--table"]) == 0

    out = capsys.readouterr().out
    assert "Key groups" in out
    assert "user" in out
    assert "other" in out


def test_connection_failure_exits_1(isolated_home, capsys):
    with patch(
        "rkeys.api.store.Store.Store.__enter__",
        side_effect=StoreConnectionError("redis://localhost:6379", "Connection refused"),
    ):
        assert main(["keys", "list", "*"]) == 1

    assert "Connection refused" in capsys.readouterr().err


def test_invalid_display(isolated_home, capsys):
    assert main(["--display", "xml", "keys", "list", "*"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_no_arguments_shows_help(isolated_home, capsys):
    assert main([]) == 0
    assert "keys" in capsys.readouterr().out
