"""CLI display implementation using Rich library."""

import sys
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.table import Table

from .Display import Display


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _escape_raw_bytes(text: str) -> str:
    """Spell undecodable key bytes (lone surrogates) as ``\\udcXX`` escapes."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class CLIDisplay(Display):
    """Rich display: stage messages on stderr, data on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, **kwargs) -> None:
        self.stderr_console.print(f"[dim]{_timestamp()}[/dim] [red]✗[/red] {message}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        import json

        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            import yaml

            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer_name = "yaml"
        else:
            text = _escape_raw_bytes(json.dumps(data, indent=indent, ensure_ascii=False)) + "\n"
            lexer_name = "json"

        if sys.stdout.isatty():
            from pygments import highlight
            from pygments.formatters import Terminal256Formatter
            from pygments.lexers import get_lexer_by_name

            text = highlight(text, get_lexer_by_name(lexer_name), Terminal256Formatter(style="monokai"))
        print(text, end="")

    def table(self, rows: list[dict[str, Any]], columns: list[str], title: str = "", **kwargs) -> None:  # noqa: ARG002
        table = Table(title=title or None)
        for column in columns:
            justify = "right" if rows and isinstance(rows[0].get(column), int) else "left"
            table.add_column(column.capitalize(), justify=justify)
        for row in rows:
            table.add_row(*(_escape_raw_bytes(str(row.get(column, ""))) for column in columns))
        self.console.print(table)
