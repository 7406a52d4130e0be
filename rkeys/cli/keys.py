"""Keys Typer app that registers all keys commands."""

import typer

from rkeys.api.keys.cmd_delete import cmd_delete
from rkeys.api.keys.cmd_get import cmd_get
from rkeys.api.keys.cmd_list import cmd_list
from rkeys.api.keys.cmd_stats import cmd_stats
from rkeys.cli._display_format import _display_format
from rkeys.cli._handle_stage_result import _handle_stage_result
from rkeys.cli._store_options import _store_options

keys_app = typer.Typer(
    name="keys",
    help="Scan, read, delete and count keys",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)


@keys_app.callback(invoke_without_command=True)
def keys_callback(ctx: typer.Context) -> None:
    """Keys operations - shows available commands."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit()


def list_command(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Glob pattern, e.g. 'session:*'"),
    sort: bool = typer.Option(False, "--sort", "-s", help="Sort keys by byte value"),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse the order (applied after --sort)"),
) -> None:
    """List keys matching a pattern."""
    _handle_stage_result(cmd_list, _display_format(ctx))(pattern, sort=sort, reverse=reverse, **_store_options(ctx))


def get_command(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Glob pattern, e.g. 'session:*'"),
    limit: int | None = typer.Option(None, "--limit", "-l", min=0, help="Read only the first N keys"),
) -> None:
    """Read the string values of keys matching a pattern."""
    _handle_stage_result(cmd_get, _display_format(ctx))(pattern, limit=limit, **_store_options(ctx))


def delete_command(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Glob pattern, e.g. 'session:*'"),
    dry_run: bool = typer.Option(
        True, "--dry-run/--execute", help="Only count matching keys unless --execute is given"
    ),
) -> None:
    """Delete keys matching a pattern, 1000 at a time with a pause between chunks."""
    _handle_stage_result(cmd_delete, _display_format(ctx))(pattern, dry_run=dry_run, **_store_options(ctx))


def _print_stats_table(output: dict) -> None:
    from rkeys.cli.display.display_context import display_context

    display = display_context.get_display()
    rows = list(output["groups"])
    if output["unmatched"]:
        rows.append({"label": "(unmatched)", "count": output["unmatched"]})
    display.table(rows, ["label", "count"], title=f"Key groups for {output['pattern']!r}")


def stats_command(
    ctx: typer.Context,
    pattern: str = typer.Argument("*", help="Glob pattern, e.g. 'session:*'"),
    delimiter: str = typer.Option(":", "--delimiter", "-D", help="Delimiter that ends a group label"),
    prefix: str = typer.Option("", "--prefix", "-p", help="Literal prefix stripped before grouping"),
    table: bool = typer.Option(False, "--table", "-t", help="Print a table instead of YAML/JSON"),
) -> None:
    """Count keys per group, ranked by frequency."""
    printer = _print_stats_table if table else None
    _handle_stage_result(cmd_stats, _display_format(ctx), result_printer=printer)(
        pattern, delimiter=delimiter, prefix=prefix, **_store_options(ctx)
    )


keys_app.command(name="list")(list_command)
keys_app.command(name="get")(get_command)
keys_app.command(name="delete")(delete_command)
keys_app.command(name="stats")(stats_command)
