"""
Scalar Kalman Filter
====================

A one-dimensional Kalman filter without control input, for smoothing a
noisy scalar series under the linear model

    x_{t+1} = A x_t + w_t,   z_t = H x_t + v_t

Main components:
- models: Filter parameters
- filtering: The filter, batch runners and result containers
- utils: Config I/O, logging, synthetic data

Example usage:
    >>> from scalar_kalman import ScalarKalman, kfilter
    >>> kf = ScalarKalman(A=1.0, H=1.0, Q=0.001, R=1.0, x0=0.0, P0=1.0)
    >>> estimates = kfilter(kf, [1.0, 1.0, 1.0])
"""

__version__ = "0.1.0"

# Core imports
from scalar_kalman.models.params import FilterParams
from scalar_kalman.filtering import (
    ScalarKalman,
    INVERSE_EPS,
    kfilter,
    run_batch,
    filter_trace,
    StepResult,
    FilterTrace,
    FailedInverse,
)

# Utilities
from scalar_kalman.utils.io import load_config, save_config, params_from_config
from scalar_kalman.utils.simulation import simulate_linear_gaussian

__all__ = [
    # Version
    "__version__",
    # Params
    "FilterParams",
    # Filtering
    "ScalarKalman",
    "INVERSE_EPS",
    "kfilter",
    "run_batch",
    "filter_trace",
    "StepResult",
    "FilterTrace",
    "FailedInverse",
    # Config
    "load_config",
    "save_config",
    "params_from_config",
    # Simulation
    "simulate_linear_gaussian",
]
