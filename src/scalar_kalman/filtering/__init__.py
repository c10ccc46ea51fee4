"""
Scalar Kalman filtering.

Provides:
- ScalarKalman: predict / update / advance on a single scalar state
- kfilter: batch filtering over a sequence of observations
- run_batch: batch filtering that keeps pandas indexes
- filter_trace: batch filtering with per-step diagnostics
"""

from scalar_kalman.filtering.errors import FailedInverse
from scalar_kalman.filtering.kalman_scalar import (
    INVERSE_EPS,
    ScalarKalman,
    kfilter,
    run_batch,
    filter_trace,
)
from scalar_kalman.filtering.results import StepResult, FilterTrace

__all__ = [
    # Filter
    "ScalarKalman",
    "INVERSE_EPS",
    # Batch
    "kfilter",
    "run_batch",
    "filter_trace",
    # Results
    "StepResult",
    "FilterTrace",
    # Errors
    "FailedInverse",
]
