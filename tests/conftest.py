"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from rkeys.api.config.RKeysConfig import RKeysConfig


def pytest_configure(config):
    for marker in ("unit", "store", "scan", "batch", "stats", "keys", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid rkeys configuration dict for testing (in-memory store)."""
    return {
        "store": {
            "type": "fakeredis",
            "data": {},
        },
        "log": {
            "level": "DEBUG",
        },
    }


def minimal_rkeys_config() -> RKeysConfig:
    """Build an RKeysConfig from the minimal config dict."""
    return RKeysConfig(**minimal_config_dict())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point RKEYS_HOME at an empty directory so no test reads ~/.rkeys."""
    home = tmp_path / "rkeys-home"
    monkeypatch.setenv("RKEYS_HOME", str(home))
    return home


@pytest.fixture
def rkeys_home(isolated_home: Path, minimal_config_dict: dict) -> Path:
    """Set up RKEYS_HOME with a minimal config file.

    Returns:
        Path to the rkeys home directory
    """
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.json").write_text(json.dumps(minimal_config_dict))
    return isolated_home


@pytest.fixture
def fake_redis():
    """A client on the shared in-memory server used by the fakeredis backend.

    The server is flushed before and after each test.
    """
    import fakeredis

    from rkeys.api.store._fakeredis._client import _get_fakeredis_server

    client = fakeredis.FakeRedis(server=_get_fakeredis_server(), decode_responses=True)
    client.flushall()
    yield client
    client.flushall()
    client.close()


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
