"""
Scalar Kalman Filter (no control input).

Model:
    State:  x_{t+1} = A x_t + w_t,  w_t ~ N(0, Q)
    Obs:    z_t = H x_t + v_t,      v_t ~ N(0, R)
"""

from typing import Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from scalar_kalman.filtering.errors import FailedInverse, INNOVATION_SCALAR
from scalar_kalman.filtering.results import FilterTrace, StepResult
from scalar_kalman.models.params import FilterParams
from scalar_kalman.utils.logging import get_logger

logger = get_logger(__name__)

# Smallest |S| that is still inverted in the measurement update
INVERSE_EPS = 1e-8


class ScalarKalman:
    """
    One-dimensional Kalman filter.

    ``x`` and ``P`` are the only mutable fields; ``A``, ``H``, ``Q`` and
    ``R`` are fixed at construction. Parameters are not validated.

    Parameters
    ----------
    A : float
        State transition coefficient
    H : float
        Observation coefficient
    Q : float
        Process noise variance
    R : float
        Observation noise variance
    x0 : float, optional
        Initial state estimate (default: 0.0)
    P0 : float, optional
        Initial variance (default: 0.0)
    """

    def __init__(
        self,
        A: float,
        H: float,
        Q: float,
        R: float,
        x0: Optional[float] = None,
        P0: Optional[float] = None,
    ):
        self.x = 0.0 if x0 is None else float(x0)
        self.P = 0.0 if P0 is None else float(P0)
        self._A = float(A)
        self._H = float(H)
        self._Q = float(Q)
        self._R = float(R)

    @classmethod
    def from_params(cls, params: FilterParams) -> "ScalarKalman":
        """Build a filter from a FilterParams instance."""
        return cls(params.A, params.H, params.Q, params.R, x0=params.x0, P0=params.P0)

    @property
    def A(self) -> float:
        return self._A

    @property
    def H(self) -> float:
        return self._H

    @property
    def Q(self) -> float:
        return self._Q

    @property
    def R(self) -> float:
        return self._R

    @property
    def params(self) -> FilterParams:
        """Current configuration, with the current (x, P) as initial conditions."""
        return FilterParams(A=self._A, H=self._H, Q=self._Q, R=self._R, x0=self.x, P0=self.P)

    def __repr__(self) -> str:
        return (
            f"ScalarKalman(x={self.x!r}, P={self.P!r}, A={self._A!r}, "
            f"H={self._H!r}, Q={self._Q!r}, R={self._R!r})"
        )

    def predict(self) -> None:
        """Propagate x and P one step forward under the state model."""
        self.x *= self._A
        self.P = self._A * self.P * self._A + self._Q

    def _correct(self, z: float) -> Tuple[float, float, float]:
        # Innovation
        y = z - self._H * self.x
        S = self._H * self.P * self._H + self._R

        # Checked before touching x and P so a failed update leaves them as they were
        if abs(S) < INVERSE_EPS:
            logger.debug(f"Innovation variance S={S:.3e} below {INVERSE_EPS:.0e}, z={z}")
            raise FailedInverse(INNOVATION_SCALAR)

        K = self.P * self._H * (1.0 / S)
        self.x += K * y
        self.P *= 1.0 - K * self._H
        return y, S, K

    def update(self, z: float) -> None:
        """
        Incorporate one observation.

        Parameters
        ----------
        z : float
            Observation

        Raises
        ------
        FailedInverse
            If the innovation variance S is below INVERSE_EPS in magnitude.
            x and P are left unchanged.
        """
        self._correct(float(z))

    def advance(self, z: float) -> float:
        """
        Predict, then update with ``z``.

        The prediction is not rolled back when the update fails.

        Returns
        -------
        float
            Filtered estimate after the update
        """
        self.predict()
        self.update(z)
        return self.x

    def step(self, z: float) -> StepResult:
        """Same as ``advance`` but returns the outcome instead of raising."""
        try:
            return StepResult.success(self.advance(z))
        except FailedInverse as exc:
            return StepResult.failure(exc)


def kfilter(kf: ScalarKalman, observations: Sequence[float]) -> np.ndarray:
    """
    Run ``advance`` over a sequence of observations.

    Stops at the first FailedInverse and re-raises it: no partial output
    is returned, but the filter keeps the mutations made up to and
    including the failing observation.

    Parameters
    ----------
    kf : ScalarKalman
        Filter to advance (mutated in place)
    observations : sequence of float
        Observations, in time order

    Returns
    -------
    np.ndarray
        Filtered estimates, one per observation
    """
    z = np.asarray(observations, dtype=float)
    out = np.empty(len(z))

    for t in range(len(z)):
        try:
            out[t] = kf.advance(z[t])
        except FailedInverse:
            logger.warning(f"Batch aborted at observation {t} of {len(z)}: singular innovation")
            raise

    return out


def run_batch(
    kf: ScalarKalman,
    observations: Union[Sequence[float], np.ndarray, pd.Series],
) -> Union[np.ndarray, pd.Series]:
    """
    Batch filtering that keeps pandas indexes.

    A Series input gives a Series named ``x_filt`` on the same index, any
    other sequence gives an array. Same fail-fast rules as ``kfilter``.
    """
    if isinstance(observations, pd.Series):
        x_filt = kfilter(kf, observations.to_numpy(dtype=float))
        return pd.Series(x_filt, index=observations.index, name="x_filt")

    return kfilter(kf, observations)


def filter_trace(kf: ScalarKalman, observations: Sequence[float]) -> FilterTrace:
    """
    Batch filtering that records the intermediate quantities of each step.

    Parameters
    ----------
    kf : ScalarKalman
        Filter to advance (mutated in place)
    observations : sequence of float
        Observations, in time order

    Returns
    -------
    FilterTrace
        Predicted and filtered moments, innovations and gains
    """
    z = np.asarray(observations, dtype=float)
    n = len(z)

    # Allocate arrays
    x_pred = np.zeros(n)
    P_pred = np.zeros(n)
    innovation = np.zeros(n)
    S = np.zeros(n)
    K = np.zeros(n)
    x_filt = np.zeros(n)
    P_filt = np.zeros(n)

    for t in range(n):
        # === TIME UPDATE ===
        kf.predict()
        x_pred[t] = kf.x
        P_pred[t] = kf.P

        # === MEASUREMENT UPDATE ===
        try:
            innovation[t], S[t], K[t] = kf._correct(float(z[t]))
        except FailedInverse:
            logger.warning(f"Trace aborted at observation {t} of {n}: singular innovation")
            raise

        x_filt[t] = kf.x
        P_filt[t] = kf.P

    return FilterTrace(
        x_pred=x_pred,
        P_pred=P_pred,
        innovation=innovation,
        S=S,
        K=K,
        x_filt=x_filt,
        P_filt=P_filt,
    )
