"""Summary table: the tabular projection of an ordered summary.

Built once, after the display order and time unit are final. Cells are
plain strings; presentation (borders, colours) belongs to the console
backends.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from domain.models import BenchmarkReport, Statistics, TimeUnit

MISSING_VALUE = "NA"
MISSING_PARAMETER = "?"

_STATISTIC_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Mean", "mean"),
    ("StdDev", "standard_deviation"),
    ("Median", "median"),
)


@dataclass(frozen=True)
class SummaryTableColumn:
    """One column of the summary table."""

    header: str
    content: tuple[str, ...]
    is_statistic: bool = False

    @property
    def is_common(self) -> bool:
        """True for a descriptive column whose cells are all the same."""
        return not self.is_statistic and len(set(self.content)) == 1


@dataclass(frozen=True)
class SummaryTable:
    """Headers and rows derived from a finalized summary."""

    columns: tuple[SummaryTableColumn, ...]
    time_unit: TimeUnit

    @property
    def full_header(self) -> tuple[str, ...]:
        return tuple(c.header for c in self.columns)

    @property
    def full_content(self) -> tuple[tuple[str, ...], ...]:
        return tuple(zip(*(c.content for c in self.columns), strict=True))

    @property
    def row_count(self) -> int:
        return len(self.columns[0].content) if self.columns else 0

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def common_values(self) -> dict[str, str]:
        """Descriptive columns shared by every row, header -> value.

        Empty unless there is more than one row.
        """
        if self.row_count < 2:
            return {}
        return {c.header: c.content[0] for c in self.columns if c.is_common}

    def _visible(self) -> tuple[SummaryTableColumn, ...]:
        common = self.common_values
        return tuple(c for c in self.columns if c.header not in common)

    @property
    def visible_headers(self) -> tuple[str, ...]:
        return tuple(c.header for c in self._visible())

    @property
    def visible_rows(self) -> tuple[tuple[str, ...], ...]:
        visible = self._visible()
        return tuple(zip(*(c.content for c in visible), strict=True))


def format_time(nanoseconds: float, unit: TimeUnit) -> str:
    """Format a nanosecond value in ``unit`` with its symbol."""
    return f"{unit.convert(nanoseconds):,.4f} {unit.symbol}"


def _statistic_cell(stats: Statistics | None, field_name: str, unit: TimeUnit) -> str:
    if stats is None:
        return MISSING_VALUE
    value: float = getattr(stats, field_name)
    return format_time(value, unit)


def build_summary_table(
    reports: Sequence[BenchmarkReport], time_unit: TimeUnit
) -> SummaryTable:
    """Project reports (already in display order) onto table columns.

    Columns are Target, Job, one per parameter name in first-seen order,
    then Mean, StdDev and Median expressed in ``time_unit``.
    """
    param_names: list[str] = []
    for report in reports:
        for name, _value in report.benchmark.parameters:
            if name not in param_names:
                param_names.append(name)

    columns: list[SummaryTableColumn] = [
        SummaryTableColumn("Target", tuple(r.benchmark.target for r in reports)),
        SummaryTableColumn("Job", tuple(r.benchmark.job.resolved_id for r in reports)),
    ]
    for name in param_names:
        cells = []
        for report in reports:
            params = dict(report.benchmark.parameters)
            cells.append(str(params[name]) if name in params else MISSING_PARAMETER)
        columns.append(SummaryTableColumn(name, tuple(cells)))

    for header, field_name in _STATISTIC_COLUMNS:
        cells = tuple(
            _statistic_cell(r.result_statistics, field_name, time_unit) for r in reports
        )
        columns.append(SummaryTableColumn(header, cells, is_statistic=True))

    return SummaryTable(columns=tuple(columns), time_unit=time_unit)
