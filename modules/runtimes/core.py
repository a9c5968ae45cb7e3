"""Environment renderer: the aligned list of runtimes a summary ran under.

Output is one line per distinct job, prefixed by the host line::

      [Host]     : CPython 3.12.1, Linux x86_64
      DefaultJob : CPython 3.12.1, Linux x86_64

The first report seen for a job decides that job's runtime text.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from domain.models import BenchmarkReport

HOST_LABEL = "[Host]"


def collect_runtimes(
    host_runtime: str, reports: Iterable[BenchmarkReport]
) -> dict[str, str]:
    """Return job label -> runtime text, host first, in first-seen order."""
    runtimes: dict[str, str] = {HOST_LABEL: host_runtime}
    for report in reports:
        runtime = report.get_runtime_info()
        if runtime is None:
            continue
        job_id = report.benchmark.job.resolved_id
        if job_id not in runtimes:
            runtimes[job_id] = runtime
    return runtimes


def render_runtimes(host_runtime: str, reports: Iterable[BenchmarkReport]) -> str:
    """Render the host and per-job runtimes as aligned lines.

    Args:
        host_runtime: Runtime description of the launching host.
        reports: Reports in display order.

    Returns:
        Lines joined with the platform line terminator; never empty.
    """
    runtimes = collect_runtimes(host_runtime, reports)
    width = max(len(label) for label in runtimes)
    lines = [f"  {label.ljust(width)} : {runtime}" for label, runtime in runtimes.items()]
    return os.linesep.join(lines)
