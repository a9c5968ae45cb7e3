"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the summary terminal output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """Summary terminal output protocol.

    Two layers of methods:

    **General messages** -- usable from any module::

        console.info("Collected 12 reports")
        console.success("Summary finalized")
        console.warning("Advisory validation error")
        console.error("Critical validation error")

    **Structured panels** -- tables, key-value displays, panels::

        console.panel("  [Host] : CPython 3.12", title="Runtimes")
        console.table(["Target", "Mean"], [["Sort", "1.2 us"]], title="Results")
        console.kv({"Job": "DefaultJob"}, title="Common values")

    **Summary lifecycle** -- used by ``wiring.display_summary``::

        console.summary_header("Sorting", "finalized")
        console.summary_footer(3, 12.5, has_critical_errors=False)
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured panels --------------------------------------------------

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        """Display *content* in a bordered panel."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    # -- Summary lifecycle --------------------------------------------------

    def summary_header(self, title: str, state: str) -> None:
        """Display the banner that opens a summary."""
        ...

    def summary_footer(
        self,
        benchmark_count: int,
        total_seconds: float,
        *,
        has_critical_errors: bool,
    ) -> None:
        """Display the closing line of a summary."""
        ...
