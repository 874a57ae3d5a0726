# topmark:header:start
#
#   project      : DocForge
#   file         : stats.py
#   file_relpath : src/docforge/utils/stats.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Run statistics: elapsed wall-clock time and peak resident memory."""

from __future__ import annotations

import sys
import time

from docforge.config.logging import DocforgeLogger, get_logger

logger: DocforgeLogger = get_logger(__name__)

_BYTES_PER_MB = 1024 * 1024


def peak_memory_bytes() -> int:
    """Return the peak resident set size of this process in bytes (0 if unknown)."""
    if sys.platform == "win32":
        return 0
    import resource

    peak: int = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # Linux reports kilobytes, macOS bytes.
    return peak if sys.platform == "darwin" else peak * 1024


class RunStats:
    """Stopwatch started at construction, plus a peak memory query."""

    def __init__(self) -> None:
        self.started: float = time.perf_counter()

    def elapsed_seconds(self) -> int:
        """Return whole seconds elapsed since the stopwatch started."""
        return int(time.perf_counter() - self.started)

    def peak_memory_mb(self) -> int:
        """Return the peak resident memory in megabytes, rounded to nearest."""
        return round(peak_memory_bytes() / _BYTES_PER_MB)
