"""Store connection error."""


class StoreConnectionError(Exception):
    """Raised when the store cannot be reached or the connection is lost."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Couldn't connect to {url}: {reason}")
