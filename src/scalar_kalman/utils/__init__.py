"""Utility modules for scalar_kalman."""

from scalar_kalman.utils.io import load_config, save_config, params_from_config, read_observations
from scalar_kalman.utils.logging import setup_logging, get_logger
from scalar_kalman.utils.simulation import simulate_linear_gaussian

__all__ = [
    "load_config",
    "save_config",
    "params_from_config",
    "read_observations",
    "setup_logging",
    "get_logger",
    "simulate_linear_gaussian",
]
