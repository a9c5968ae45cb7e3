"""Port interfaces for benchmark summaries.

All ports are defined as typing.Protocol. Structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports, only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.models import Benchmark, BenchmarkReport


class HostEnvironmentPort(Protocol):
    """Abstraction over the machine the benchmarks were launched from."""

    def get_runtime_info(self) -> str:
        """Return a one-line description of the host runtime."""
        ...


class PartialSummary(Protocol):
    """Read access to report data while the display order is being resolved."""

    @property
    def benchmarks(self) -> tuple[Benchmark, ...]:
        """Distinct benchmarks in the order they were supplied."""
        ...

    def has_report(self, benchmark: Benchmark) -> bool:
        """Return True if a report exists for the benchmark."""
        ...

    def report_for(self, benchmark: Benchmark) -> BenchmarkReport | None:
        """Return the report for the benchmark, or None."""
        ...


class OrderPolicy(Protocol):
    """Decides the display order of benchmarks in a summary.

    Implementations must return a permutation of ``benchmarks``: the same
    elements, each exactly once.
    """

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> Iterable[Benchmark]:
        """Return the benchmarks in display order."""
        ...
