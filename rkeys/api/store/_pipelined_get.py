"""Pipelined GET shared by every backend."""

from typing import Any

from redis.exceptions import ResponseError

from ...utils.get_logger import get_logger

logger = get_logger("store")


def _pipelined_get(pipeline: Any, keys: list[str]) -> list[str | None]:
    """Queue one GET per key on ``pipeline`` and execute it once.

    A WRONGTYPE reply for a key holding a list, hash, set... is mapped to
    None like an absent key. Any other per-key error is raised.
    """
    for key in keys:
        pipeline.get(key)
    replies = pipeline.execute(raise_on_error=False)

    values: list[str | None] = []
    for key, reply in zip(keys, replies):
        if isinstance(reply, ResponseError):
            if "WRONGTYPE" not in str(reply):
                raise reply
            logger.warning(f"Key {key!r} does not hold a string value; reading it as missing")
            values.append(None)
        else:
            values.append(reply)
    return values
