"""
kernel/config.py: Configuration constants and YAML config loading.

Settings live in an optional ``benchsummary.yaml``::

    order: fastest          # default | declared | fastest | slowest | target
    title_prefix: "nightly"
    results_directory: results
    console: auto           # auto | rich | plain
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from domain.models import SummaryConfig
from modules.ordering.core import get_order_policy

logger = logging.getLogger("benchsummary.config")

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

CONFIG_FILE = "benchsummary.yaml"
DEFAULT_RESULTS_DIRECTORY = "results"
CONSOLE_BACKENDS = ("auto", "rich", "plain")

_KNOWN_KEYS = frozenset({"order", "title_prefix", "results_directory", "console"})


class ConfigError(ValueError):
    """Raised when a config file cannot be parsed or holds invalid values."""


def config_file(project_root: Path) -> Path:
    """Return the config file path for a project."""
    return project_root / CONFIG_FILE


def config_from_dict(data: dict[str, Any]) -> SummaryConfig:
    """Build a SummaryConfig from already-parsed settings.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown config key(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    order_name = data.get("order")
    order_policy = None
    if order_name is not None:
        try:
            order_policy = get_order_policy(str(order_name))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    console_backend = str(data.get("console", "auto"))
    if console_backend not in CONSOLE_BACKENDS:
        expected = ", ".join(CONSOLE_BACKENDS)
        msg = f"Unknown console backend {console_backend!r} (expected one of {expected})"
        raise ConfigError(msg)

    return SummaryConfig(
        order_policy=order_policy,
        title_prefix=str(data.get("title_prefix", "")),
        results_directory=str(data.get("results_directory", DEFAULT_RESULTS_DIRECTORY)),
        console_backend=console_backend,
    )


def load_config(path: Path) -> SummaryConfig:
    """Load settings from a YAML file; a missing file yields the defaults."""
    if not path.exists():
        logger.debug("No config at %s; using defaults", path)
        return SummaryConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Config {path} must be a mapping, got {type(data).__name__}"
        raise ConfigError(msg)

    config = config_from_dict(data)
    logger.info(
        "Loaded config from %s (order=%s)", path, data.get("order", "default")
    )
    return config
