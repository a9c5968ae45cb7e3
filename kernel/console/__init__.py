"""kernel.console -- terminal output for benchmark summaries.

``console`` forwards every call to the active backend. A summary picks its
backend from ``SummaryConfig.console_backend`` right before it is printed::

    from kernel.console import console, use_config

    use_config(summary.config)
    console.panel(summary.all_runtimes, title="Runtimes")

Backend names are the ones ``benchsummary.yaml`` accepts for ``console``:
``plain``, ``rich``, or ``auto`` (rich on a terminal, plain when piped).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from kernel.config import CONSOLE_BACKENDS
from kernel.console._plain import PlainBackend

if TYPE_CHECKING:
    from domain.models import SummaryConfig
    from kernel.console._protocol import ConsoleProtocol

_backend: ConsoleProtocol = PlainBackend()


def create_backend(name: str) -> ConsoleProtocol:
    """Instantiate the backend registered under ``name``.

    Raises:
        ValueError: If ``name`` is not one of ``CONSOLE_BACKENDS``.
    """
    if name not in CONSOLE_BACKENDS:
        msg = f"Unknown console backend: {name!r}"
        raise ValueError(msg)
    if name == "auto":
        name = "rich" if sys.stdout.isatty() else "plain"
    if name == "plain":
        return PlainBackend()

    from kernel.console._rich import RichBackend

    return RichBackend()


def use_backend(name: str) -> ConsoleProtocol:
    """Make the backend called ``name`` the target of ``console`` and return it."""
    global _backend  # noqa: PLW0603

    _backend = create_backend(name)
    return _backend


def use_config(config: SummaryConfig) -> ConsoleProtocol:
    """Switch ``console`` to the backend a summary's config asks for."""
    return use_backend(config.console_backend)


class _ConsoleProxy:
    """Delegates to whatever backend is active at call time."""

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
