"""
Result containers for the scalar filter.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from scalar_kalman.filtering.errors import FailedInverse


@dataclass
class StepResult:
    """
    Outcome of one predict + update step, returned as a value.

    Exactly one of ``estimate`` and ``error`` is set.
    """
    ok: bool
    estimate: Optional[float] = None
    error: Optional[FailedInverse] = None

    @classmethod
    def success(cls, estimate: float) -> "StepResult":
        return cls(ok=True, estimate=estimate)

    @classmethod
    def failure(cls, error: FailedInverse) -> "StepResult":
        return cls(ok=False, error=error)

    def unwrap(self) -> float:
        """Return the estimate, or raise the stored error."""
        if not self.ok:
            raise self.error
        return self.estimate


@dataclass
class FilterTrace:
    """
    Per-step diagnostics of a batch run.
    """
    x_pred: np.ndarray                 # Predicted states E[x_t | z_{1:t-1}]
    P_pred: np.ndarray                 # Predicted variances
    innovation: np.ndarray             # z_t - H x_pred
    S: np.ndarray                      # Innovation variances
    K: np.ndarray                      # Kalman gains
    x_filt: np.ndarray                 # Filtered states E[x_t | z_{1:t}]
    P_filt: np.ndarray                 # Filtered variances

    @property
    def n_obs(self) -> int:
        """Number of processed observations."""
        return len(self.x_filt)

    @property
    def standardized_innovation(self) -> np.ndarray:
        """Innovations scaled by sqrt(S)."""
        return self.innovation / np.sqrt(self.S)

    def to_frame(self, index: Optional[pd.Index] = None) -> pd.DataFrame:
        """Convert to a DataFrame, one row per observation."""
        return pd.DataFrame(
            {
                "x_pred": self.x_pred,
                "P_pred": self.P_pred,
                "innovation": self.innovation,
                "S": self.S,
                "K": self.K,
                "x_filt": self.x_filt,
                "P_filt": self.P_filt,
            },
            index=index,
        )
