"""Read the output format stored on the Typer context."""

import typer


def _display_format(ctx: typer.Context) -> str:
    """Return ``"json"`` or ``"yaml"`` as set by ``--display``, default yaml."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    value = obj.get("display_format", "yaml")
    if value not in ("json", "yaml"):
        raise ValueError(f"Invalid display_format value: {value!r}")
    return value
