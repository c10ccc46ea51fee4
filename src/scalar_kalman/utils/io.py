"""
I/O utilities for configs and observation files.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd
import yaml

from scalar_kalman.models.params import FilterParams


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Parameters
    ----------
    config_path : str or Path
        Path to YAML config file

    Returns
    -------
    dict
        Configuration dictionary (empty if the file is empty)
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config or {}


def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """
    Save configuration to YAML file.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    config_path : str or Path
        Output path
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def params_from_config(config: Dict[str, Any]) -> FilterParams:
    """Build FilterParams from the ``filter`` section of a config."""
    if not config.get("filter"):
        raise KeyError("Config has no 'filter' section")
    return FilterParams.from_dict(config["filter"])


def read_observations(path: Union[str, Path], column: Optional[str] = None) -> pd.Series:
    """
    Read one column of observations from a CSV file.

    Parameters
    ----------
    path : str or Path
        CSV file
    column : str, optional
        Column to read. If None, ``z`` is used when present (the column
        written by ``simulate``), otherwise the first column that is not
        the ``t`` row label.

    Returns
    -------
    pd.Series
        Observations as floats, on the file's row index
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")

    df = pd.read_csv(path)

    if column is None:
        if "z" in df.columns:
            column = "z"
        else:
            candidates = [c for c in df.columns if c != "t"]
            if not candidates:
                raise KeyError(f"No observation column in {path.name}")
            column = candidates[0]
    elif column not in df.columns:
        raise KeyError(f"Column '{column}' not in {path.name} (columns: {list(df.columns)})")

    return df[column].astype(float)


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure directory exists, creating if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
