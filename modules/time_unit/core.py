"""Unit selector: picks one readable time unit for a whole summary.

Rule: take the smallest sampled mean and choose the first unit on the
ladder (ns, us, ms, s, m, h, d) in which that mean is below 1000. The
smallest value drives the choice so that no displayed mean drops below
one whole unit unless it is already below one nanosecond.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from domain.models import TimeUnit

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("benchsummary.time_unit")

FALLBACK_UNIT = TimeUnit.NANOSECOND

# Values below this many units are shown in that unit.
_MAGNITUDE_LIMIT = 1000


def select_time_unit(means: Iterable[float]) -> TimeUnit:
    """Choose the display unit for a set of mean times in nanoseconds.

    Pure and order-independent. Non-finite and negative values are ignored;
    with nothing left to sample the fallback unit (nanoseconds) is returned.
    """
    sampled = [m for m in means if math.isfinite(m) and m >= 0]
    if not sampled:
        logger.debug("No completed reports; using %s", FALLBACK_UNIT.description)
        return FALLBACK_UNIT

    smallest = min(sampled)
    for unit in TimeUnit:
        if smallest < unit.nanosecond_amount * _MAGNITUDE_LIMIT:
            return unit
    return TimeUnit.DAY
