"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for stubbing the store.
"""

from unittest.mock import MagicMock

import pytest

from tests.conftest import minimal_config_dict, minimal_rkeys_config, run_cmd

__all__ = [
    "make_store",
    "minimal_config_dict",
    "minimal_rkeys_config",
    "run_cmd",
]


def make_store(clustered: bool = False) -> MagicMock:
    """MagicMock standing in for an opened Store."""
    store = MagicMock()
    store.is_clustered.return_value = clustered
    store.store_config.url = "redis://test:6379"
    store.delete.side_effect = lambda keys: len(keys)
    store.multi_get.side_effect = lambda keys: [f"value-of-{key}" for key in keys]
    return store


@pytest.fixture
def mock_store() -> MagicMock:
    return make_store()
