"""
wiring.py: Composition root for benchmark summaries.

Connects the pipeline modules to their default adapters: the running
interpreter as host environment, ``benchsummary.yaml`` as configuration
and ``kernel.console`` as terminal output.

    summary = wiring.summarize("Sorting", reports)
    wiring.display_summary(summary)
"""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from adapters.host_environment import PlatformHostEnvironment
from kernel.config import config_file, load_config
from kernel.console import console, use_config
from modules.summary.core import build_failed, build_from_reports

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.models import Benchmark, BenchmarkReport, SummaryConfig, ValidationError
    from domain.ports import HostEnvironmentPort
    from modules.summary.core import Summary

logger = logging.getLogger("benchsummary.wiring")


def _resolve_config(config: SummaryConfig | None, project_root: Path | None) -> SummaryConfig:
    if config is not None:
        return config
    return load_config(config_file(project_root or Path.cwd()))


def _full_title(config: SummaryConfig, title: str) -> str:
    if config.title_prefix:
        return f"{config.title_prefix}-{title}"
    return title


def summarize(
    title: str,
    reports: Iterable[BenchmarkReport],
    *,
    host: HostEnvironmentPort | None = None,
    config: SummaryConfig | None = None,
    project_root: Path | None = None,
    total_time: timedelta = timedelta(0),
    validation_errors: Iterable[ValidationError] = (),
) -> Summary:
    """Build a finalized summary with default adapters filled in.

    When ``config`` is None it is loaded from ``benchsummary.yaml`` under
    ``project_root`` (default: the current directory).
    """
    config = _resolve_config(config, project_root)
    host = host or PlatformHostEnvironment()
    return build_from_reports(
        _full_title(config, title),
        reports,
        host,
        config=config,
        results_directory_path=config.results_directory,
        total_time=total_time,
        validation_errors=validation_errors,
    )


def summarize_failed(
    title: str,
    benchmarks: Iterable[Benchmark],
    *,
    host: HostEnvironmentPort | None = None,
    config: SummaryConfig | None = None,
    project_root: Path | None = None,
    validation_errors: Iterable[ValidationError] = (),
) -> Summary:
    """Build a failed summary for a run that never started measuring."""
    config = _resolve_config(config, project_root)
    host = host or PlatformHostEnvironment()
    return build_failed(
        benchmarks,
        _full_title(config, title),
        host,
        config=config,
        results_directory_path=config.results_directory,
        validation_errors=validation_errors,
    )


def _error_text(error: ValidationError) -> str:
    if error.benchmark is None:
        return error.message
    return f"{error.benchmark.display_info}: {error.message}"


def display_summary(summary: Summary) -> None:
    """Print a summary through the console backend its config selects."""
    use_config(summary.config)
    console.summary_header(summary.title, summary.state.value)

    host = summary.host_environment_info
    if isinstance(host, PlatformHostEnvironment):
        console.kv(host.as_dict(), title="Host")
    console.panel(summary.all_runtimes, title="Runtimes")

    table = summary.table
    if table.common_values:
        console.kv(table.common_values, title="Common values")
    if table.row_count:
        console.table(
            list(table.visible_headers),
            [list(row) for row in table.visible_rows],
            title=f"Results ({table.time_unit.description})",
        )
    else:
        console.warning(f"No results for {len(summary.benchmarks)} benchmark(s)")

    failed = [r for r in summary.reports if not r.success]
    if summary.reports and not failed:
        console.success(f"All {len(summary.reports)} benchmark(s) produced results")
    for report in failed:
        console.warning(f"{report.benchmark.display_info}: no result")

    for error in summary.validation_errors:
        if error.is_critical:
            console.error(_error_text(error))
        else:
            console.warning(_error_text(error))

    if summary.results_directory_path:
        console.info(f"Results directory: {summary.results_directory_path}")
    console.summary_footer(
        len(summary.benchmarks),
        summary.total_time.total_seconds(),
        has_critical_errors=summary.has_critical_validation_errors,
    )
    logger.debug("Displayed summary %r", summary.title)
