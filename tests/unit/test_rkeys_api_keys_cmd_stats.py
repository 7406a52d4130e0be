"""Unit tests for keys cmd_stats."""

import pytest

from rkeys.api.keys.cmd_stats import cmd_stats
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.keys


class TestCmdStats:
    def test_groups(self, rkeys_home, fake_redis):
        for key in ("user:1", "user:2", "user:3", "cart:1", "flag"):
            fake_redis.set(key, "x")

        result = run_cmd(cmd_stats)

        assert result.success
        assert result.output["groups"][0] == {"label": "user", "count": 3}
        assert {g["label"]: g["count"] for g in result.output["groups"]} == {"user": 3, "cart": 1, "other": 1}
        assert result.output["total"] == 5
        assert result.output["unmatched"] == 0
        assert result.output["warnings"] == []

    def test_prefix_and_unmatched(self, rkeys_home, fake_redis):
        for key in ("app:user:1", "app:user:2", "legacy:1"):
            fake_redis.set(key, "x")

        result = run_cmd(cmd_stats, "*", prefix="app:")

        assert result.output["groups"] == [{"label": "app:user", "count": 2}]
        assert result.output["unmatched"] == 1
        assert result.output["warnings"] == ["1 key(s) did not start with 'app:'"]

    def test_custom_delimiter(self, rkeys_home, fake_redis):
        fake_redis.set("a/b", "x")
        fake_redis.set("a/c", "x")

        result = run_cmd(cmd_stats, "*", delimiter="/")

        assert result.output["groups"] == [{"label": "a", "count": 2}]

    def test_empty_delimiter(self, rkeys_home):
        result = run_cmd(cmd_stats, "*", delimiter="")
        assert not result.success
        assert "delimiter must not be empty" in result.output["errors"][0]

    def test_groups_keys_that_are_not_utf8(self, rkeys_home, fake_redis):
        fake_redis.set(b"\xff:1", "x")
        fake_redis.set(b"\xff:2", "x")

        result = run_cmd(cmd_stats, "*")

        assert result.success
        assert result.output["groups"] == [{"label": "\udcff", "count": 2}]
