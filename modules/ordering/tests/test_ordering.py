"""Tests for modules/ordering/core.py: ordering policies and the resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from modules.collector.core import collect_reports
from modules.ordering.core import (
    DeclaredOrderPolicy,
    DefaultOrderPolicy,
    FastestToSlowestPolicy,
    OrderPolicyError,
    SlowestToFastestPolicy,
    TargetNameOrderPolicy,
    get_order_policy,
    policy_names,
    resolve_order,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain.models import Benchmark, BenchmarkReport, Job
    from domain.ports import PartialSummary


class _DroppingPolicy:
    """Loses the last benchmark."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        return list(benchmarks[:-1])


class _DuplicatingPolicy:
    """Repeats the first benchmark in place of the last."""

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        return [*benchmarks[:-1], benchmarks[0]]


class _InventingPolicy:
    """Swaps the last benchmark for one that was never supplied."""

    def __init__(self, stranger: Benchmark) -> None:
        self._stranger = stranger

    def get_summary_order(
        self, benchmarks: tuple[Benchmark, ...], summary: PartialSummary
    ) -> list[Benchmark]:
        return [*benchmarks[:-1], self._stranger]


def _targets(benchmarks: tuple[Benchmark, ...]) -> list[str]:
    return [b.target for b in benchmarks]


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class TestDefaultPolicy:
    def test_sorts_numeric_parameters_numerically(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
    ) -> None:
        reports = [
            report_factory(benchmark_factory("Sort", size=100)),
            report_factory(benchmark_factory("Sort", size=9)),
            report_factory(benchmark_factory("Sort", size=10)),
        ]
        index = collect_reports(reports)

        ordered = resolve_order(index.benchmarks, index)

        assert [dict(b.parameters)["size"] for b in ordered] == [9, 10, 100]

    def test_groups_jobs_in_first_seen_order(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
        job_factory: Callable[..., Job],
    ) -> None:
        fast, slow = job_factory("Fast"), job_factory("Slow")
        reports = [
            report_factory(benchmark_factory("A", slow)),
            report_factory(benchmark_factory("B", fast)),
            report_factory(benchmark_factory("C", slow)),
        ]
        index = collect_reports(reports)

        ordered = DefaultOrderPolicy().get_summary_order(index.benchmarks, index)

        assert [b.target for b in ordered] == ["A", "C", "B"]

    def test_is_used_when_no_policy_given(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
    ) -> None:
        reports = [
            report_factory(benchmark_factory("Sort", size=2)),
            report_factory(benchmark_factory("Sort", size=1)),
        ]
        index = collect_reports(reports)

        assert resolve_order(index.benchmarks, index, None) == resolve_order(
            index.benchmarks, index, DefaultOrderPolicy()
        )

    def test_ints_beyond_float_range_sort_natively(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
    ) -> None:
        reports = [
            report_factory(benchmark_factory("Pow", n=10**400)),
            report_factory(benchmark_factory("Pow", n=1)),
            report_factory(benchmark_factory("Pow", n=2.5)),
        ]
        index = collect_reports(reports)

        ordered = resolve_order(index.benchmarks, index)

        assert [dict(b.parameters)["n"] for b in ordered] == [1, 2.5, 10**400]

    def test_compares_parameters_by_name_not_position(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
    ) -> None:
        reports = [
            report_factory(benchmark_factory("Sort", size=2, kind="b")),
            report_factory(benchmark_factory("Sort", kind="a", size=1)),
        ]
        index = collect_reports(reports)

        ordered = resolve_order(index.benchmarks, index)

        assert [dict(b.parameters)["kind"] for b in ordered] == ["a", "b"]

    def test_list_parameters_do_not_break_sorting(
        self,
        benchmark_factory: Callable[..., Benchmark],
        report_factory: Callable[..., BenchmarkReport],
    ) -> None:
        reports = [
            report_factory(benchmark_factory("Sum", values=[3, 4])),
            report_factory(benchmark_factory("Sum", values=[1, 2])),
        ]
        index = collect_reports(reports)

        ordered = resolve_order(index.benchmarks, index)

        assert [dict(b.parameters)["values"] for b in ordered] == [(1, 2), (3, 4)]


def test_declared_policy_keeps_input_order(
    scenario_reports: list[BenchmarkReport],
) -> None:
    index = collect_reports(reversed(scenario_reports))

    ordered = resolve_order(index.benchmarks, index, DeclaredOrderPolicy())

    assert _targets(ordered) == ["C", "B", "A"]


def test_fastest_to_slowest_puts_missing_statistics_last(
    benchmark_factory: Callable[..., Benchmark],
    report_factory: Callable[..., BenchmarkReport],
) -> None:
    reports = [
        report_factory(benchmark_factory("Broken"), mean=None),
        report_factory(benchmark_factory("Slow"), mean=5_000.0),
        report_factory(benchmark_factory("Fast"), mean=50.0),
    ]
    index = collect_reports(reports)

    ordered = resolve_order(index.benchmarks, index, FastestToSlowestPolicy())

    assert _targets(ordered) == ["Fast", "Slow", "Broken"]


def test_slowest_to_fastest_puts_missing_statistics_last(
    benchmark_factory: Callable[..., Benchmark],
    report_factory: Callable[..., BenchmarkReport],
) -> None:
    reports = [
        report_factory(benchmark_factory("Broken"), mean=None),
        report_factory(benchmark_factory("Fast"), mean=50.0),
        report_factory(benchmark_factory("Slow"), mean=5_000.0),
    ]
    index = collect_reports(reports)

    ordered = resolve_order(index.benchmarks, index, SlowestToFastestPolicy())

    assert _targets(ordered) == ["Slow", "Fast", "Broken"]


def test_target_name_policy_is_alphabetical(
    benchmark_factory: Callable[..., Benchmark],
    report_factory: Callable[..., BenchmarkReport],
) -> None:
    reports = [report_factory(benchmark_factory(n)) for n in ("Parse", "Encode", "Hash")]
    index = collect_reports(reports)

    ordered = resolve_order(index.benchmarks, index, TargetNameOrderPolicy())

    assert _targets(ordered) == ["Encode", "Hash", "Parse"]


def test_same_inputs_give_same_order(
    benchmark_factory: Callable[..., Benchmark],
    report_factory: Callable[..., BenchmarkReport],
) -> None:
    """Two independent resolutions of the same reports agree."""

    def build() -> tuple[Benchmark, ...]:
        reports = [
            report_factory(benchmark_factory("Sort", size=s, kind=k), mean=float(s))
            for s in (3, 1, 2)
            for k in ("b", "a")
        ]
        index = collect_reports(reports)
        return resolve_order(index.benchmarks, index)

    assert build() == build()


# ---------------------------------------------------------------------------
# Resolver validation
# ---------------------------------------------------------------------------


def test_policy_dropping_a_benchmark_is_rejected(
    scenario_reports: list[BenchmarkReport],
) -> None:
    index = collect_reports(scenario_reports)
    with pytest.raises(OrderPolicyError, match="permutation"):
        resolve_order(index.benchmarks, index, _DroppingPolicy())


def test_policy_duplicating_a_benchmark_is_rejected(
    scenario_reports: list[BenchmarkReport],
) -> None:
    index = collect_reports(scenario_reports)
    with pytest.raises(OrderPolicyError):
        resolve_order(index.benchmarks, index, _DuplicatingPolicy())


def test_policy_inventing_a_benchmark_is_rejected(
    scenario_reports: list[BenchmarkReport],
    benchmark_factory: Callable[..., Benchmark],
) -> None:
    index = collect_reports(scenario_reports)
    policy = _InventingPolicy(benchmark_factory("Stranger"))
    with pytest.raises(OrderPolicyError):
        resolve_order(index.benchmarks, index, policy)


def test_order_policy_error_is_a_value_error() -> None:
    assert issubclass(OrderPolicyError, ValueError)


def test_empty_candidate_set_resolves_to_empty() -> None:
    index = collect_reports([])
    assert resolve_order((), index) == ()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("default", DefaultOrderPolicy),
        ("declared", DeclaredOrderPolicy),
        ("fastest", FastestToSlowestPolicy),
        ("slowest", SlowestToFastestPolicy),
        ("target", TargetNameOrderPolicy),
        ("  Fastest ", FastestToSlowestPolicy),
    ],
)
def test_get_order_policy_by_name(name: str, expected: type) -> None:
    assert isinstance(get_order_policy(name), expected)


def test_get_order_policy_unknown_name_raises() -> None:
    with pytest.raises(ValueError, match="Unknown order policy"):
        get_order_policy("random")


def test_policy_names_lists_registry() -> None:
    assert policy_names() == ("default", "declared", "fastest", "slowest", "target")
