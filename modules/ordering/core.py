"""Order resolver: pluggable display order for summary benchmarks.

Each policy is a small class satisfying the ``OrderPolicy`` port. The
resolver runs the configured policy (or the default one) and rejects any
result that is not an exact permutation of its input, so a faulty policy
can never produce a summary whose benchmarks and reports disagree.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models import Benchmark
    from domain.ports import OrderPolicy, PartialSummary

logger = logging.getLogger("benchsummary.ordering")


class OrderPolicyError(ValueError):
    """Raised when an ordering policy returns something other than a permutation."""


def _parameter_key(benchmark: Benchmark) -> tuple[tuple[str, int, object], ...]:
    # Keyed by parameter name so values are only compared against values of
    # the same parameter. Numbers sort natively and ahead of everything else.
    key: list[tuple[str, int, object]] = []
    for name, value in sorted(benchmark.parameters, key=lambda p: p[0]):
        if isinstance(value, (int, float)):
            key.append((name, 0, value))
        else:
            key.append((name, 1, str(value)))
    return tuple(key)


def _mean_or_none(benchmark: Benchmark, summary: PartialSummary) -> float | None:
    report = summary.report_for(benchmark)
    if report is None or report.result_statistics is None:
        return None
    return report.result_statistics.mean


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class DefaultOrderPolicy:
    """Orders by parameter values, then by job in first-seen order.

    Ties keep the order in which benchmarks were supplied.
    """

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        job_rank: dict[str, int] = {}
        for b in benchmarks:
            job_rank.setdefault(b.job.resolved_id, len(job_rank))
        return sorted(
            benchmarks,
            key=lambda b: (_parameter_key(b), job_rank[b.job.resolved_id]),
        )


class DeclaredOrderPolicy:
    """Keeps benchmarks in the order they were supplied."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        return list(benchmarks)


class FastestToSlowestPolicy:
    """Ascending mean time; benchmarks without statistics go last."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        def key(b: Benchmark) -> tuple[int, float]:
            mean = _mean_or_none(b, summary)
            return (1, 0.0) if mean is None else (0, mean)

        return sorted(benchmarks, key=key)


class SlowestToFastestPolicy:
    """Descending mean time; benchmarks without statistics go last."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        def key(b: Benchmark) -> tuple[int, float]:
            mean = _mean_or_none(b, summary)
            return (1, 0.0) if mean is None else (0, -mean)

        return sorted(benchmarks, key=key)


class TargetNameOrderPolicy:
    """Alphabetical by target name."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        return sorted(benchmarks, key=lambda b: b.target)


_POLICIES: dict[str, type[OrderPolicy]] = {
    "default": DefaultOrderPolicy,
    "declared": DeclaredOrderPolicy,
    "fastest": FastestToSlowestPolicy,
    "slowest": SlowestToFastestPolicy,
    "target": TargetNameOrderPolicy,
}


def policy_names() -> tuple[str, ...]:
    """Names accepted by ``get_order_policy``."""
    return tuple(_POLICIES)


def get_order_policy(name: str) -> OrderPolicy:
    """Instantiate the ordering policy registered under ``name``.

    Raises:
        ValueError: If no policy has that name.
    """
    try:
        policy_cls = _POLICIES[name.strip().lower()]
    except KeyError:
        msg = f"Unknown order policy: {name!r} (expected one of {', '.join(_POLICIES)})"
        raise ValueError(msg) from None
    return policy_cls()


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


def resolve_order(
    benchmarks: tuple[Benchmark, ...],
    summary: PartialSummary,
    policy: OrderPolicy | None = None,
) -> tuple[Benchmark, ...]:
    """Apply ``policy`` (or the default) and validate the result.

    Args:
        benchmarks: Distinct candidate benchmarks.
        summary: Read access to the collected reports.
        policy: Ordering policy; None selects ``DefaultOrderPolicy``.

    Returns:
        The benchmarks in display order.

    Raises:
        OrderPolicyError: If the policy drops, duplicates or invents benchmarks.
    """
    if policy is None:
        policy = DefaultOrderPolicy()

    ordered = tuple(policy.get_summary_order(benchmarks, summary))

    if len(ordered) != len(benchmarks) or set(ordered) != set(benchmarks):
        msg = (
            f"{type(policy).__name__} returned {len(ordered)} benchmark(s) that do not "
            f"form a permutation of the {len(benchmarks)} supplied"
        )
        logger.error(msg)
        raise OrderPolicyError(msg)

    logger.debug("Resolved order of %d benchmark(s) with %s", len(ordered), type(policy).__name__)
    return ordered
