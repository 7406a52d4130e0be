"""Output schemas for keys commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class KeysListOutput(BaseOutputSchema):
    """Output schema for keys list command."""

    pattern: str = Field(..., description="Glob pattern that was scanned")
    sorted: bool = Field(..., description="Whether keys were sorted by byte value")
    reversed: bool = Field(..., description="Whether key order was reversed after any sort")
    count: int = Field(..., description="Number of keys matched")
    keys: list[str] = Field(..., description="Matched keys")


class KeysGetOutput(BaseOutputSchema):
    """Output schema for keys get command."""

    pattern: str = Field(..., description="Glob pattern that was scanned")
    limit: int | None = Field(..., description="Maximum number of keys read, null if unlimited")
    count: int = Field(..., description="Number of keys read")
    missing: int = Field(..., description="Keys that were absent or did not hold a string")
    values: list[dict[str, Any]] = Field(..., description="Entries of {key, value}; value is null when missing")


class KeysDeleteOutput(BaseOutputSchema):
    """Output schema for keys delete command."""

    pattern: str = Field(..., description="Glob pattern that was scanned")
    dry_run: bool = Field(..., description="True if nothing was deleted")
    matched_count: int = Field(..., description="Number of keys matched by the scan")
    deleted_count: int = Field(..., description="Number of keys removed, 0 on a dry run")
    chunk_count: int = Field(..., description="Number of delete chunks issued")


class KeysStatsOutput(BaseOutputSchema):
    """Output schema for keys stats command."""

    pattern: str = Field(..., description="Glob pattern that was scanned")
    delimiter: str = Field(..., description="Delimiter that ends a group label")
    prefix: str = Field(..., description="Literal prefix stripped before grouping")
    total: int = Field(..., description="Number of keys classified")
    unmatched: int = Field(..., description="Keys that did not start with the prefix")
    groups: list[dict[str, Any]] = Field(..., description="Entries of {label, count} by descending count")


register_output_schema("keys", "list", KeysListOutput)
register_output_schema("keys", "get", KeysGetOutput)
register_output_schema("keys", "delete", KeysDeleteOutput)
register_output_schema("keys", "stats", KeysStatsOutput)
