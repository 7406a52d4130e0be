"""Read the global store options stored on the Typer context."""

import typer


def _store_options(ctx: typer.Context) -> dict:
    """Return ``{"url": ..., "cluster": ...}`` as set by the main callback."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return {"url": obj.get("url"), "cluster": obj.get("cluster", False)}
