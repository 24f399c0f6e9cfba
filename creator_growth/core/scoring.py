from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_PACKAGED_SCORING_CONFIG = Path(__file__).resolve().parents[1] / "config" / "scoring.yaml"


def scoring_config_path() -> Path:
    """SCORING_CONFIG_PATH if set, else the scoring.yaml shipped inside the package."""
    override = os.getenv("SCORING_CONFIG_PATH", "").strip()
    return Path(override) if override else _PACKAGED_SCORING_CONFIG


def load_scoring_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(f"Scoring config not found at '{path}'.")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Weights, caps and thresholds for every score, loaded once per process."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is None:
        _SCORING_CONFIG_CACHE = load_scoring_file(scoring_config_path())
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dotted lookup, e.g. 'fame_score.followers.cap'; missing keys give `default`."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def round_half_up(value: float) -> int:
    """Scores round .5 upwards, not to the nearest even integer."""
    return int(math.floor(value + 0.5))
