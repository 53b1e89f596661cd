"""
Benchmarking module for data structure and algorithm efficiency.

This module provides the efficiency cases (duplicate detection, frequency
counting, sorting), the equivalence checks between their strategies and a
Triton-inspired runner for scaling sweeps.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    create_case_benchmark,
    perf_report,
)
from .cases import (
    CASES,
    DUPLICATE_CHECKING,
    FREQUENCY_COUNTING,
    SORTING_PERFORMANCE,
    BenchmarkCase,
    CaseResult,
    StrategyOutcome,
    run_case,
)
from .equivalence import EquivalenceError

__all__ = [
    "BenchmarkCase",
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "CASES",
    "CaseResult",
    "DUPLICATE_CHECKING",
    "EquivalenceError",
    "FREQUENCY_COUNTING",
    "SORTING_PERFORMANCE",
    "StrategyOutcome",
    "create_case_benchmark",
    "perf_report",
    "run_case",
]
