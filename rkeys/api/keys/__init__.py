"""Keys API module."""

from .._output_schemas.keys import KeysDeleteOutput, KeysGetOutput, KeysListOutput, KeysStatsOutput

__all__ = [
    "KeysDeleteOutput",
    "KeysGetOutput",
    "KeysListOutput",
    "KeysStatsOutput",
]
