"""Batch API module."""

from .BatchOperationError import BatchOperationError
from .bulk_delete import bulk_delete
from .bulk_read import bulk_read
from .chunked import chunk_count, chunked
from .DeleteProgress import DeleteProgress

__all__ = [
    "BatchOperationError",
    "DeleteProgress",
    "bulk_delete",
    "bulk_read",
    "chunk_count",
    "chunked",
]
