"""Create the main Typer CLI app."""

import typer

from rkeys.constants import DEFAULT_URL
from rkeys.cli.keys import keys_app


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="A collection of useful commands to work with Redis / Valkey",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(keys_app, name="keys")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        url: str | None = typer.Option(
            None, "--url", "-u", help=f"Connection URL to the instance (default: config file, else {DEFAULT_URL})"
        ),
        cluster: bool = typer.Option(False, "--cluster", "-c", help="Enable cluster mode"),
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["url"] = url
        ctx.obj["cluster"] = cluster

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
