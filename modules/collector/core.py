"""Report collector: maps each benchmark to its report.

Builds the identity map that later pipeline stages (ordering, unit
selection, table construction) use for point lookups. Benchmarks are
value-identified, so a benchmark supplied twice keeps only its last
report while its position is the first one seen.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.models import Benchmark, BenchmarkReport

logger = logging.getLogger("benchsummary.collector")


class ReportIndex:
    """Lookup from benchmark to report, plus the distinct benchmarks seen.

    Satisfies the ``PartialSummary`` port so ordering policies can read
    measured results while the display order is being resolved.
    """

    def __init__(self, reports: Iterable[BenchmarkReport] = ()) -> None:
        self._map: dict[Benchmark, BenchmarkReport] = {}
        for report in reports:
            # dict keeps first insertion position; assignment keeps last value.
            self._map[report.benchmark] = report
        self._benchmarks = tuple(self._map)

    @property
    def benchmarks(self) -> tuple[Benchmark, ...]:
        return self._benchmarks

    def __len__(self) -> int:
        return len(self._map)

    def has_report(self, benchmark: Benchmark) -> bool:
        return benchmark in self._map

    def report_for(self, benchmark: Benchmark) -> BenchmarkReport | None:
        """Return the report for ``benchmark``, or None if there is none."""
        return self._map.get(benchmark)

    def reports_for(self, benchmarks: Iterable[Benchmark]) -> tuple[BenchmarkReport, ...]:
        """Return the reports parallel to ``benchmarks``.

        Raises KeyError if any benchmark has no report.
        """
        return tuple(self._map[b] for b in benchmarks)


def collect_reports(reports: Iterable[BenchmarkReport]) -> ReportIndex:
    """Build a ``ReportIndex`` from an ordered or unordered list of reports."""
    reports = list(reports)
    index = ReportIndex(reports)
    duplicates = len(reports) - len(index)
    if duplicates:
        logger.debug("Collapsed %d duplicate report(s); last report wins", duplicates)
    logger.debug("Collected %d report(s)", len(index))
    return index
