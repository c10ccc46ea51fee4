"""
Simulation utilities for generating synthetic observation series.
"""

import numpy as np
import pandas as pd
from typing import Optional

from scalar_kalman.models.params import FilterParams


def simulate_linear_gaussian(
    params: FilterParams,
    n: int = 500,
    seed: Optional[int] = 42,
) -> pd.DataFrame:
    """
    Simulate a hidden state and its noisy observations.

    The series follow the scalar linear Gaussian model:
        x_t = A x_{t-1} + sqrt(Q) * w_t
        z_t = H x_t + sqrt(R) * v_t

    with x_0 = params.x0 and w_t, v_t i.i.d. standard normal.

    Parameters
    ----------
    params : FilterParams
        Model parameters. Q and R must be non-negative.
    n : int, default 500
        Number of time steps to simulate.
    seed : int or None, default 42
        Random seed for reproducibility. None for random initialization.

    Returns
    -------
    pd.DataFrame
        Columns ``x_true`` and ``z`` with an integer index.

    Examples
    --------
    >>> df = simulate_linear_gaussian(FilterParams(A=0.9, H=1.0, Q=0.01, R=0.1), n=200, seed=7)
    >>> df.columns.tolist()
    ['x_true', 'z']
    """
    if params.Q < 0 or params.R < 0:
        raise ValueError(f"Noise variances must be non-negative (Q={params.Q}, R={params.R})")

    rng = np.random.default_rng(seed)
    x = np.empty(n)
    z = np.empty(n)

    sqrt_q = np.sqrt(params.Q)
    sqrt_r = np.sqrt(params.R)
    prev = params.x0
    for t in range(n):
        x[t] = params.A * prev + sqrt_q * rng.standard_normal()
        z[t] = params.H * x[t] + sqrt_r * rng.standard_normal()
        prev = x[t]

    return pd.DataFrame({"x_true": x, "z": z})
