"""
Parameter dataclasses for the scalar filter.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class FilterParams:
    """
    Parameters for the scalar linear state-space model.

    State equation:  x_{t+1} = A x_t + w_t,  w_t ~ N(0, Q)
    Observation:     z_t = H x_t + v_t,      v_t ~ N(0, R)

    No sanity checks are applied: Q >= 0 and R >= 0 are left to the caller.
    """
    A: float                     # State transition coefficient
    H: float                     # Observation coefficient
    Q: float                     # Process noise variance
    R: float                     # Observation noise variance

    # Initial conditions
    x0: float = 0.0              # Initial state estimate
    P0: float = 0.0              # Initial error variance

    @property
    def is_random_walk(self) -> bool:
        """Check if the state model is a random walk (A == 1)."""
        return abs(self.A - 1.0) < 1e-10

    @property
    def is_stable(self) -> bool:
        """Check if the state model is mean-reverting (|A| < 1)."""
        return abs(self.A) < 1.0

    @property
    def signal_to_noise(self) -> float:
        """Ratio Q / R (inf when R is zero)."""
        if abs(self.R) < 1e-12:
            return float("inf")
        return self.Q / self.R

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            "A": self.A,
            "H": self.H,
            "Q": self.Q,
            "R": self.R,
            "x0": self.x0,
            "P0": self.P0,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FilterParams":
        """
        Create from dictionary.

        Unknown keys are ignored, ``None`` initial conditions fall back to
        the defaults.

        Raises
        ------
        KeyError
            If one of the required coefficients A, H, Q, R is missing or null.
        """
        for key in ("A", "H", "Q", "R"):
            if d.get(key) is None:
                raise KeyError(f"Missing filter parameter: {key}")

        kwargs = {k: float(v) for k, v in d.items()
                  if k in cls.__dataclass_fields__ and v is not None}
        return cls(**kwargs)

    def summary(self) -> str:
        """Generate text summary."""
        lines = [
            "Scalar Kalman parameters:",
            f"  A  = {self.A:.6f}",
            f"  H  = {self.H:.6f}",
            f"  Q  = {self.Q:.2e}",
            f"  R  = {self.R:.2e}",
            f"  x0 = {self.x0:.6f}",
            f"  P0 = {self.P0:.2e}",
        ]
        return "\n".join(lines)
