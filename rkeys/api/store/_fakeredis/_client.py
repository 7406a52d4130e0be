"""Shared fakeredis server (UNO: single helper)."""

import fakeredis

# Shared in-memory server for all instances (singleton pattern)
_shared_fakeredis_server: fakeredis.FakeServer | None = None


def _get_fakeredis_server() -> fakeredis.FakeServer:
    """Get or create shared fakeredis server."""
    global _shared_fakeredis_server
    if _shared_fakeredis_server is None:
        _shared_fakeredis_server = fakeredis.FakeServer()
    return _shared_fakeredis_server
