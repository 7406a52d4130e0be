"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from rkeys.api.config.RKeysConfig import RKeysConfig
    from rkeys.cli._create_app import _create_app
    from rkeys.utils.configure_logging import configure_logging
    from rkeys.utils.get_home_dir import get_home_dir
    from rkeys.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        print(f"rkeys {get_package_version()}")
        return 0

    try:
        level = RKeysConfig.load().log.level
    except ValueError:
        # Reported again by the command itself
        level = "INFO"
    configure_logging(get_home_dir(), level=level)

    app = _create_app()
    try:
        app(argv, prog_name="rkeys")
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0 if e.code is None else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
