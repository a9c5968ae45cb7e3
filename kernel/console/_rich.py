"""kernel.console._rich -- Rich backend.

Coloured summary output: rules around the summary, bordered panels and
boxed result tables.
"""

from __future__ import annotations

from typing import IO

from rich import box
from rich.console import Console
from rich.markup import escape as rich_escape
from rich.rule import Rule
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "title": "bold cyan",
        "dim": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, *, file: IO[str] | None = None, width: int | None = None) -> None:
        self._con = Console(theme=_THEME, highlight=False, file=file, width=width)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {rich_escape(message)}", style="info")

    def success(self, message: str) -> None:
        self._con.print(f"  ✓ {rich_escape(message)}", style="success")

    def warning(self, message: str) -> None:
        self._con.print(f"  ⚠ {rich_escape(message)}", style="warning")

    def error(self, message: str) -> None:
        self._con.print(f"  ✗ {rich_escape(message)}", style="error")

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        from rich.panel import Panel

        self._con.print(
            Panel(rich_escape(content), title=title or None, border_style=style or "dim"),
        )

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        from rich.table import Table

        t = Table(title=title or None, box=box.SIMPLE, show_edge=False, pad_edge=True)
        for h in headers:
            t.add_column(rich_escape(h))
        for r in rows:
            t.add_row(*(rich_escape(c) for c in r))
        self._con.print(t)

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        from rich.table import Table

        t = Table(
            title=title or None,
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold", justify="right")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(rich_escape(k), rich_escape(v))
        self._con.print(t)

    # -- Summary lifecycle --------------------------------------------------

    def summary_header(self, title: str, state: str) -> None:
        self._con.print()
        self._con.print(
            Rule(f" Summary: {rich_escape(title)} ", style="title", align="left"),
        )
        self._con.print(f"  [dim]{state}[/]")

    def summary_footer(
        self,
        benchmark_count: int,
        total_seconds: float,
        *,
        has_critical_errors: bool,
    ) -> None:
        icon = "✗" if has_critical_errors else "✓"
        style = "red" if has_critical_errors else "green"
        self._con.print()
        self._con.print(
            Rule(
                f" {icon} {benchmark_count} benchmark(s) "
                f"── total time {total_seconds:.1f}s ",
                style=style,
            ),
        )
