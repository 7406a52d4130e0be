"""Scan pagination error."""


class ScanError(Exception):
    """Raised when a SCAN page fails; the scan it belongs to is over."""

    def __init__(self, pattern: str, node: str, reason: str):
        self.pattern = pattern
        self.node = node
        self.reason = reason
        super().__init__(f"Scan of {pattern!r} failed on {node}: {reason}")
