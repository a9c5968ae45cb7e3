"""Shared pytest fixtures and test factories for benchmark summaries.

Provides:
- Fake HostEnvironmentPort implementation
- Factory functions for all domain models with sensible defaults
- Pytest fixtures wrapping the most commonly used factories
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from domain.models import (
    Benchmark,
    BenchmarkReport,
    Job,
    Statistics,
    SummaryConfig,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Callable


# ── Fake Port Implementations ─────────────────────────────────────────────


class FakeHost:
    """HostEnvironmentPort returning a fixed runtime description."""

    def __init__(self, runtime: str = "CPython 3.12.1, Linux x86_64") -> None:
        self.runtime = runtime
        self.calls = 0

    def get_runtime_info(self) -> str:
        """Return the configured runtime text."""
        self.calls += 1
        return self.runtime


# ── Domain Model Factories ───────────────────────────────────────────────


def make_job(job_id: str | None = "DefaultJob", **characteristics: str) -> Job:
    """Create a Job with an explicit id and optional characteristics."""
    return Job(id=job_id, characteristics=tuple(sorted(characteristics.items())))


def make_benchmark(
    target: str = "Sort",
    job: Job | None = None,
    **parameters: object,
) -> Benchmark:
    """Create a Benchmark with sensible defaults."""
    if job is None:
        job = make_job()
    return Benchmark(target=target, job=job, parameters=tuple(parameters.items()))


def make_statistics(mean: float = 1_200.0, standard_deviation: float = 10.0) -> Statistics:
    """Create Statistics around a mean (nanoseconds)."""
    return Statistics(
        mean=mean,
        standard_deviation=standard_deviation,
        median=mean,
        min=mean - standard_deviation,
        max=mean + standard_deviation,
        n=15,
    )


def make_report(
    benchmark: Benchmark | None = None,
    mean: float | None = 1_200.0,
    runtime_info: str | None = "CPython 3.12.1",
) -> BenchmarkReport:
    """Create a BenchmarkReport; ``mean=None`` means the run produced no statistics."""
    if benchmark is None:
        benchmark = make_benchmark()
    stats = None if mean is None else make_statistics(mean)
    return BenchmarkReport(benchmark=benchmark, result_statistics=stats, runtime_info=runtime_info)


def make_validation_error(
    message: str = "Benchmark class is not public",
    *,
    is_critical: bool = False,
    benchmark: Benchmark | None = None,
) -> ValidationError:
    """Create a ValidationError with sensible defaults."""
    return ValidationError(is_critical=is_critical, message=message, benchmark=benchmark)


def make_scenario_reports() -> list[BenchmarkReport]:
    """Three benchmarks A, B, C under jobs J1, J1, J2.

    A and B completed (1.2 us and 3.4 us); C has no statistics and no runtime.
    """
    j1 = make_job("J1")
    j2 = make_job("J2")
    return [
        make_report(make_benchmark("A", j1), mean=1_200.0, runtime_info="runtime-v1"),
        make_report(make_benchmark("B", j1), mean=3_400.0, runtime_info="runtime-v1"),
        make_report(make_benchmark("C", j2), mean=None, runtime_info=None),
    ]


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def fake_host() -> FakeHost:
    """Provide a host reporting a fixed runtime."""
    return FakeHost("OS X / CPython")


@pytest.fixture
def declared_config() -> SummaryConfig:
    """Provide a config that keeps benchmarks in supplied order."""
    from modules.ordering.core import DeclaredOrderPolicy

    return SummaryConfig(order_policy=DeclaredOrderPolicy())


@pytest.fixture
def scenario_reports() -> list[BenchmarkReport]:
    """Provide the A/B/C reports over jobs J1 and J2."""
    return make_scenario_reports()


@pytest.fixture
def benchmark_factory() -> Callable[..., Benchmark]:
    """Provide the make_benchmark factory function."""
    return make_benchmark


@pytest.fixture
def report_factory() -> Callable[..., BenchmarkReport]:
    """Provide the make_report factory function."""
    return make_report


@pytest.fixture
def job_factory() -> Callable[..., Job]:
    """Provide the make_job factory function."""
    return make_job


@pytest.fixture
def validation_error_factory() -> Callable[..., ValidationError]:
    """Provide the make_validation_error factory function."""
    return make_validation_error
