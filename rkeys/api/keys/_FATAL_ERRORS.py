"""Errors that end a keys command with success=False instead of a traceback."""

from ..batch.BatchOperationError import BatchOperationError
from ..scan.ScanError import ScanError
from ..store.StoreConnectionError import StoreConnectionError

# ValueError covers config file and argument validation
_FATAL_ERRORS = (ValueError, StoreConnectionError, ScanError, BatchOperationError)
