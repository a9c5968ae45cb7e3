"""Core data types for benchmark summaries.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.ports import OrderPolicy


class TimeUnit(Enum):
    """Display units for measured durations, smallest first.

    Each value is ``(symbol, description, nanosecond_amount)``.
    """

    NANOSECOND = ("ns", "Nanosecond", 1)
    MICROSECOND = ("us", "Microsecond", 1_000)
    MILLISECOND = ("ms", "Millisecond", 1_000_000)
    SECOND = ("s", "Second", 1_000_000_000)
    MINUTE = ("m", "Minute", 60_000_000_000)
    HOUR = ("h", "Hour", 3_600_000_000_000)
    DAY = ("d", "Day", 86_400_000_000_000)

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]

    @property
    def nanosecond_amount(self) -> int:
        return self.value[2]

    def convert(self, nanoseconds: float) -> float:
        """Express a nanosecond value in this unit."""
        return nanoseconds / self.nanosecond_amount


class SummaryState(Enum):
    """Construction stage of a summary."""

    EMPTY = "empty"
    COLLECTED = "collected"
    ORDERED = "ordered"
    FINALIZED = "finalized"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Benchmark identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Job:
    """A named execution configuration shared by one or more benchmarks."""

    id: str | None = None
    characteristics: tuple[tuple[str, str], ...] = ()

    @property
    def resolved_id(self) -> str:
        """Display identifier used to group runtime descriptors.

        An explicit id wins. Otherwise the id is derived from the
        characteristics, so equal configurations share an id.
        """
        if self.id:
            return self.id
        if not self.characteristics:
            return "DefaultJob"
        text = ";".join(f"{k}={v}" for k, v in sorted(self.characteristics))
        digest = hashlib.sha1(text.encode("utf-8")).hexdigest()
        return f"Job-{digest[:6].upper()}"


def _hashable(value: object) -> object:
    """Turn list, set and dict parameter values into (nested) tuples."""
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return tuple(sorted((_hashable(v) for v in value), key=repr))
    if isinstance(value, dict):
        return tuple(sorted(((k, _hashable(v)) for k, v in value.items()), key=repr))
    return value


@dataclass(frozen=True)
class Benchmark:
    """A single measured target under a specific job.

    Parameter values may be lists, sets or dicts; they are stored as tuples
    so benchmarks stay hashable.
    """

    target: str
    job: Job = Job()
    parameters: tuple[tuple[str, object], ...] = ()

    def __post_init__(self) -> None:
        params = tuple((name, _hashable(value)) for name, value in self.parameters)
        object.__setattr__(self, "parameters", params)

    @property
    def display_info(self) -> str:
        if self.parameters:
            params = ", ".join(f"{k}={v}" for k, v in self.parameters)
            return f"{self.target}({params}): {self.job.resolved_id}"
        return f"{self.target}: {self.job.resolved_id}"


# ---------------------------------------------------------------------------
# Measurement results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Statistics:
    """Pre-computed result statistics. All durations are in nanoseconds."""

    mean: float
    standard_deviation: float = 0.0
    median: float = 0.0
    min: float = 0.0
    max: float = 0.0
    n: int = 0


@dataclass(frozen=True)
class BenchmarkReport:
    """Outcome of running one benchmark.

    ``result_statistics`` is None when the run failed or was skipped.
    """

    benchmark: Benchmark
    result_statistics: Statistics | None = None
    runtime_info: str | None = None

    @property
    def success(self) -> bool:
        return self.result_statistics is not None

    def get_runtime_info(self) -> str | None:
        return self.runtime_info


@dataclass(frozen=True)
class ValidationError:
    """A problem flagged by an external validator before the run."""

    is_critical: bool
    message: str
    benchmark: Benchmark | None = None


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SummaryConfig:
    """Settings that shape how a summary is assembled and displayed."""

    order_policy: OrderPolicy | None = None
    title_prefix: str = ""
    results_directory: str = "results"
    console_backend: str = "auto"

    def get_order_provider(self) -> OrderPolicy | None:
        """Return the configured ordering policy, or None for the default."""
        return self.order_policy
