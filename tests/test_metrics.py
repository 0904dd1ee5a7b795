# =============================================================================
# test_metrics.py - Size Metrics and Memory Telemetry Tests
# =============================================================================

import re

import pytest
from tsx_analyzer.metrics import (
    SizeMetrics,
    compute_metrics,
    format_memory,
    measure,
    memory_usage,
    memory_usage_report,
    reduction_percent,
)


class TestReductionPercent:
    """Test the reduction formula."""

    def test_zero_original(self):
        """An empty original gives 0, never a division error."""
        assert reduction_percent(0, 0) == 0.0

    @pytest.mark.parametrize("original,optimized,expected", [
        (200, 150, 25.0),
        (100, 100, 0.0),
        (10, 0, 100.0),
    ])
    def test_formula(self, original, optimized, expected):
        """(original - optimized) / original * 100."""
        assert reduction_percent(original, optimized) == pytest.approx(expected)


class TestSizeMetrics:
    """Test SizeMetrics construction."""

    def test_compute_metrics(self):
        """compute_metrics fills every field."""
        assert compute_metrics(200, 150) == SizeMetrics(200, 150, 25.0)

    def test_measure_counts_characters(self):
        """Sizes are character counts, not bytes."""
        metrics = measure("é" * 4, "é" * 2)
        assert metrics.original_size == 4
        assert metrics.optimized_size == 2
        assert metrics.reduction_percent == pytest.approx(50.0)

    def test_saved(self):
        """saved is the number of characters removed."""
        assert measure("abcdef", "ab").saved == 4

    def test_empty(self):
        """Empty text reports no reduction."""
        assert measure("", "") == SizeMetrics(0, 0, 0.0)


class TestMemoryTelemetry:
    """Test the memory usage query."""

    def test_memory_usage_positive(self):
        """The process always has some resident memory."""
        assert memory_usage() > 0

    @pytest.mark.parametrize("num_bytes,expected", [
        (0, "0.00 MB"),
        (3 * 1024 * 1024, "3.00 MB"),
        (1536 * 1024, "1.50 MB"),
    ])
    def test_format_memory(self, num_bytes, expected):
        """Bytes are shown as megabytes with two decimals."""
        assert format_memory(num_bytes) == expected

    def test_report_format(self):
        """The report is a formatted megabyte figure."""
        assert re.fullmatch(r"\d+\.\d{2} MB", memory_usage_report())
