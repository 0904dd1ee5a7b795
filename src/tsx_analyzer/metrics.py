"""
Size Metrics and Memory Telemetry
=================================

Size statistics for an optimization run, plus the informational
server-memory figure attached to every response.

Sizes are character counts (``len(text)``), used the same way for the
original and the optimized text.

Reduction Formula
-----------------
    reduction_percent = (original - optimized) / original * 100

and 0 when the original is empty.
"""

from dataclasses import dataclass

import psutil


BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class SizeMetrics:
    """
    Size comparison between original and optimized code.

    Attributes:
        original_size: Length of the original text
        optimized_size: Length of the optimized text
        reduction_percent: Percentage removed (0 for empty input)
    """
    original_size: int
    optimized_size: int
    reduction_percent: float

    @property
    def saved(self) -> int:
        """Characters removed by optimization."""
        return self.original_size - self.optimized_size


def reduction_percent(original_size: int, optimized_size: int) -> float:
    """Percentage of the original removed; 0.0 when original_size is 0."""
    if original_size <= 0:
        return 0.0
    return (original_size - optimized_size) / original_size * 100


def compute_metrics(original_size: int, optimized_size: int) -> SizeMetrics:
    """Build SizeMetrics from two sizes in the same unit."""
    return SizeMetrics(
        original_size=original_size,
        optimized_size=optimized_size,
        reduction_percent=reduction_percent(original_size, optimized_size),
    )


def measure(original: str, optimized: str) -> SizeMetrics:
    """Build SizeMetrics from the original and optimized texts."""
    return compute_metrics(len(original), len(optimized))


# =============================================================================
# Memory Telemetry
# =============================================================================

def memory_usage() -> int:
    """Resident set size of the current process, in bytes."""
    return psutil.Process().memory_info().rss


def format_memory(num_bytes: int) -> str:
    """Format a byte count as megabytes, e.g. '42.17 MB'."""
    return f"{num_bytes / BYTES_PER_MB:.2f} MB"


def memory_usage_report() -> str:
    """Current memory usage, formatted for display."""
    return format_memory(memory_usage())
