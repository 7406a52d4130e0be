"""Bulk operation error."""


class BatchOperationError(Exception):
    """Raised when a pipelined read or a delete fails on a chunk.

    Chunks before ``chunk_index`` completed and are not undone; later chunks
    were not attempted.
    """

    def __init__(self, operation: str, chunk_index: int, reason: str):
        self.operation = operation
        self.chunk_index = chunk_index
        self.reason = reason
        super().__init__(f"{operation} failed on chunk {chunk_index + 1}: {reason}")
