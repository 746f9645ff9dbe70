"""Advisory duration logging for engine operations.

Slow operations are logged, never raised: the thresholds are soft
interactive-latency targets.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_MS = 100.0


@contextmanager
def advisory_timer(
    operation: str,
    threshold_ms: float | None = DEFAULT_THRESHOLD_MS,
    *,
    items: int | None = None,
) -> Iterator[None]:
    """Log a warning when the wrapped block runs longer than ``threshold_ms``.

    Args:
        operation: Name used in the log message
        threshold_ms: Advisory limit in milliseconds; ``None`` disables the check
        items: Optional input size included in the message
    """
    start = time.perf_counter()
    yield
    elapsed_ms = (time.perf_counter() - start) * 1000
    if threshold_ms is not None and elapsed_ms > threshold_ms:
        logger.warning(
            "%s took %.2fms (target: <%.0fms, items: %s)",
            operation,
            elapsed_ms,
            threshold_ms,
            "n/a" if items is None else items,
        )
