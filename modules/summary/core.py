"""Summary aggregate: one immutable view over a finished benchmark run.

Construction runs a fixed pipeline::

    EMPTY -> COLLECTED -> ORDERED -> FINALIZED
    EMPTY -> FAILED

collect reports, resolve the display order, select the time unit, then
build the table and runtime block. ``build_from_reports`` drives the
success path; ``build_failed`` covers runs that never produced reports.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import TYPE_CHECKING, Generic, TypeVar

from domain.models import SummaryConfig, SummaryState
from modules.collector.core import ReportIndex, collect_reports
from modules.ordering.core import resolve_order
from modules.runtimes.core import render_runtimes
from modules.summary_table.core import SummaryTable, build_summary_table
from modules.time_unit.core import FALLBACK_UNIT, select_time_unit

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from domain.models import Benchmark, BenchmarkReport, Job, TimeUnit, ValidationError
    from domain.ports import HostEnvironmentPort

logger = logging.getLogger("benchsummary.summary")

_T = TypeVar("_T")

# Allowed forward transitions of the construction pipeline.
_TRANSITIONS: dict[SummaryState, tuple[SummaryState, ...]] = {
    SummaryState.EMPTY: (SummaryState.COLLECTED, SummaryState.FAILED),
    SummaryState.COLLECTED: (SummaryState.ORDERED,),
    SummaryState.ORDERED: (SummaryState.FINALIZED,),
    SummaryState.FINALIZED: (),
    SummaryState.FAILED: (),
}


class Lazy(Generic[_T]):
    """Compute-once cell, safe to read from several threads."""

    def __init__(self, factory: Callable[[], _T]) -> None:
        self._factory: Callable[[], _T] | None = factory
        self._value: _T | None = None
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._factory is None

    @property
    def value(self) -> _T:
        if self._factory is not None:
            with self._lock:
                if self._factory is not None:
                    self._value = self._factory()
                    self._factory = None
        return self._value  # type: ignore[return-value]


class _Pipeline:
    """Tracks the construction stage and rejects out-of-order steps."""

    def __init__(self) -> None:
        self.state = SummaryState.EMPTY

    def advance(self, target: SummaryState) -> None:
        if target not in _TRANSITIONS[self.state]:
            msg = f"Illegal summary transition: {self.state.value} -> {target.value}"
            raise RuntimeError(msg)
        logger.debug("Summary %s -> %s", self.state.value, target.value)
        self.state = target


class Summary:
    """Immutable result of a benchmark run.

    Use ``build_from_reports`` or ``build_failed`` rather than calling the
    constructor directly.
    """

    def __init__(
        self,
        *,
        title: str,
        benchmarks: tuple[Benchmark, ...],
        reports: tuple[BenchmarkReport, ...],
        report_index: ReportIndex,
        time_unit: TimeUnit,
        table: SummaryTable,
        all_runtimes: str,
        host_environment_info: HostEnvironmentPort,
        config: SummaryConfig,
        results_directory_path: str,
        total_time: timedelta,
        validation_errors: tuple[ValidationError, ...],
        state: SummaryState,
    ) -> None:
        if reports and len(reports) != len(benchmarks):
            msg = f"{len(reports)} report(s) for {len(benchmarks)} benchmark(s)"
            raise ValueError(msg)
        self._title = title
        self._benchmarks = benchmarks
        self._reports = reports
        self._index = report_index
        self._time_unit = time_unit
        self._table = table
        self._all_runtimes = all_runtimes
        self._host = host_environment_info
        self._config = config
        self._results_directory_path = results_directory_path
        self._total_time = total_time
        self._validation_errors = validation_errors
        self._state = state
        self._jobs: Lazy[tuple[Job, ...]] = Lazy(lambda: tuple(b.job for b in self._benchmarks))

    # -- Pass-through fields ----------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @property
    def host_environment_info(self) -> HostEnvironmentPort:
        return self._host

    @property
    def config(self) -> SummaryConfig:
        return self._config

    @property
    def results_directory_path(self) -> str:
        return self._results_directory_path

    @property
    def total_time(self) -> timedelta:
        return self._total_time

    @property
    def validation_errors(self) -> tuple[ValidationError, ...]:
        return self._validation_errors

    @property
    def state(self) -> SummaryState:
        return self._state

    # -- Derived fields ---------------------------------------------------

    @property
    def benchmarks(self) -> tuple[Benchmark, ...]:
        return self._benchmarks

    @property
    def reports(self) -> tuple[BenchmarkReport, ...]:
        return self._reports

    @property
    def time_unit(self) -> TimeUnit:
        return self._time_unit

    @property
    def table(self) -> SummaryTable:
        return self._table

    @property
    def all_runtimes(self) -> str:
        return self._all_runtimes

    @property
    def jobs(self) -> tuple[Job, ...]:
        """Jobs parallel to ``benchmarks``, computed on first access."""
        return self._jobs.value

    @property
    def has_critical_validation_errors(self) -> bool:
        return any(e.is_critical for e in self._validation_errors)

    # -- Lookups ------------------------------------------------------------

    def has_report(self, benchmark: Benchmark) -> bool:
        return self._index.has_report(benchmark)

    def report_for(self, benchmark: Benchmark) -> BenchmarkReport | None:
        """Return the report for ``benchmark`` or None if there is none."""
        return self._index.report_for(benchmark)

    def __getitem__(self, benchmark: Benchmark) -> BenchmarkReport | None:
        return self._index.report_for(benchmark)

    def __repr__(self) -> str:
        return (
            f"Summary(title={self._title!r}, state={self._state.value}, "
            f"benchmarks={len(self._benchmarks)}, reports={len(self._reports)})"
        )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def build_from_reports(
    title: str,
    reports: Iterable[BenchmarkReport],
    host_environment_info: HostEnvironmentPort,
    config: SummaryConfig | None = None,
    results_directory_path: str = "",
    total_time: timedelta = timedelta(0),
    validation_errors: Iterable[ValidationError] = (),
) -> Summary:
    """Assemble a finalized summary from completed (or partially failed) reports.

    Raises:
        OrderPolicyError: If the configured ordering policy misbehaves.
    """
    config = config or SummaryConfig()
    errors = tuple(validation_errors)
    pipeline = _Pipeline()

    index = collect_reports(reports)
    pipeline.advance(SummaryState.COLLECTED)

    benchmarks = resolve_order(index.benchmarks, index, config.get_order_provider())
    ordered_reports = index.reports_for(benchmarks)
    pipeline.advance(SummaryState.ORDERED)

    time_unit = select_time_unit(
        r.result_statistics.mean for r in ordered_reports if r.result_statistics is not None
    )
    table = build_summary_table(ordered_reports, time_unit)
    all_runtimes = render_runtimes(host_environment_info.get_runtime_info(), ordered_reports)
    pipeline.advance(SummaryState.FINALIZED)

    summary = Summary(
        title=title,
        benchmarks=benchmarks,
        reports=ordered_reports,
        report_index=index,
        time_unit=time_unit,
        table=table,
        all_runtimes=all_runtimes,
        host_environment_info=host_environment_info,
        config=config,
        results_directory_path=results_directory_path,
        total_time=total_time,
        validation_errors=errors,
        state=pipeline.state,
    )
    logger.info(
        "Summary %r: %d benchmark(s), unit %s", title, len(benchmarks), time_unit.symbol
    )
    if summary.has_critical_validation_errors:
        logger.warning("Summary %r has critical validation errors", title)
    return summary


def build_failed(
    benchmarks: Iterable[Benchmark],
    title: str,
    host_environment_info: HostEnvironmentPort,
    config: SummaryConfig | None = None,
    results_directory_path: str = "",
    validation_errors: Iterable[ValidationError] = (),
) -> Summary:
    """Assemble a summary for a run that could not start measuring.

    The attempted benchmarks are kept as given; reports and table rows are
    empty and the runtime block holds only the host line.
    """
    config = config or SummaryConfig()
    errors = tuple(validation_errors)
    pipeline = _Pipeline()
    pipeline.advance(SummaryState.FAILED)

    summary = Summary(
        title=title,
        benchmarks=tuple(benchmarks),
        reports=(),
        report_index=ReportIndex(),
        time_unit=FALLBACK_UNIT,
        table=build_summary_table((), FALLBACK_UNIT),
        all_runtimes=render_runtimes(host_environment_info.get_runtime_info(), ()),
        host_environment_info=host_environment_info,
        config=config,
        results_directory_path=results_directory_path,
        total_time=timedelta(0),
        validation_errors=errors,
        state=pipeline.state,
    )
    logger.warning(
        "Summary %r failed: %d benchmark(s), %d validation error(s)",
        title,
        len(summary.benchmarks),
        len(errors),
    )
    return summary
