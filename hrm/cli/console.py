"""Rich-backed output helpers for the CLI.

Results go to stdout, failures to stderr, so command output stays pipeable.
"""

from functools import cache
from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

# Mirrors the badge colours of RoleResolver.get_role_display
ROLE_STYLES = {
    "intern": "green",
    "employee": "yellow",
    "manager": "blue",
    "admin": "dark_orange",
    "super_admin": "red",
}


class Console:
    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._out = RichConsole(force_terminal=force_terminal)
        self._err = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        self._out.print(f"[green]✓[/green] {message}")

    def warning(self, message: str) -> None:
        self._out.print(f"[yellow]⚠[/yellow] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error, and an optional dimmed hint line, to stderr."""
        self._err.print(f"[red]✗[/red] {message}")
        if hint:
            self._err.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._out.print(*args, **kwargs)

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],
        *,
        title: str | None = None,
    ) -> None:
        """Render dict rows as a table.

        ``columns`` is a list of ``(key, header)`` pairs. A ``role`` column is
        coloured by role.
        """
        table = Table(title=title, header_style="bold")
        for _, header in columns:
            table.add_column(header)
        for row in rows:
            cells = []
            for key, _ in columns:
                value = str(row.get(key, ""))
                cells.append(role_markup(value) if key == "role" else value)
            table.add_row(*cells)
        self._out.print(table)

    def panel(self, content: str, *, title: str | None = None, subtitle: str | None = None) -> None:
        self._out.print(Panel(content, title=title, subtitle=subtitle, border_style="dim"))


def role_markup(role: str) -> str:
    style = ROLE_STYLES.get(role)
    return f"[{style}]{role}[/{style}]" if style else role


@cache
def get_console() -> Console:
    """Process-wide Console."""
    return Console()
