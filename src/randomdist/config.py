"""
Configuration for distribution sampling.

Settings come from the environment so that scripts and tests can override
them without code changes:

- RANDOMDIST_SEED: integer seed for the process-wide default generator
- RANDOMDIST_MAX_REJECTIONS: cap on rejection-loop attempts for new sampling
  contexts (unset or 0 means unbounded). Geometric draws count failures
  against it, so a cap also truncates large geometric values.
- RANDOMDIST_CONFIG: YAML file of named distributions, e.g.

    distributions:
      latency: {distribution: log_normal, mean: 4.0, standard_deviation: 0.5}
      retries: {distribution: geometric, probability: 0.7}
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

SEED_ENV = "RANDOMDIST_SEED"
MAX_REJECTIONS_ENV = "RANDOMDIST_MAX_REJECTIONS"
CONFIG_ENV = "RANDOMDIST_CONFIG"


def _get_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_default_seed() -> int | None:
    """Seed for the default generator; None lets random.Random use OS entropy."""
    return _get_int(SEED_ENV)


def get_max_rejections() -> int | None:
    """Rejection-loop cap for new contexts; None means loops are unbounded."""
    value = _get_int(MAX_REJECTIONS_ENV)
    if value is None or value == 0:
        return None
    if value < 0:
        raise ValueError(f"{MAX_REJECTIONS_ENV} must be non-negative, got {value}")
    return value


def get_config_path() -> Path | None:
    """Path of the named-distributions YAML file, if configured."""
    raw = os.environ.get(CONFIG_ENV, "").strip()
    return Path(raw).expanduser() if raw else None


def load_yaml(path: Path, default: Any = None) -> Any:
    """Load YAML file; return default on a missing, unreadable or unparsable file."""
    if default is None:
        default = {}
    if not path.exists():
        logger.warning("Config file %s not found; using defaults", path)
        return default
    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Could not load %s: %s", path, exc)
        return default
    return data if isinstance(data, dict) else default
