"""Application configuration — loaded from config.json at project root.

Only the CLI reads this; the calculators have fixed defaults.
Set PF_CONFIG to point at a different file.
"""

import json
import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    default_inflation_rate: Decimal = Decimal("0.06")
    log_level: str = "WARNING"


_DEFAULTS = AppConfig()
_cached: Optional[AppConfig] = None


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    for _ in range(10):
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: current working directory
    return Path.cwd()


def config_path() -> Path:
    override = os.environ.get("PF_CONFIG")
    if override:
        return Path(override)
    return _find_project_root() / "config.json"


def _validated(cfg: AppConfig) -> AppConfig:
    if cfg.default_inflation_rate <= -1:
        raise ConfigError(f"default_inflation_rate must be greater than -1, got {cfg.default_inflation_rate}")
    level = cfg.log_level.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {cfg.log_level!r}")
    cfg.log_level = level
    return cfg


def get_config() -> AppConfig:
    global _cached
    if _cached is not None:
        return _cached
    path = config_path()
    if not path.exists():
        _cached = AppConfig()
        return _cached
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        _cached = _validated(AppConfig(
            default_inflation_rate=Decimal(str(data.get("default_inflation_rate", _DEFAULTS.default_inflation_rate))),
            log_level=str(data.get("log_level", _DEFAULTS.log_level)),
        ))
    except (OSError, ValueError, InvalidOperation, AttributeError, ConfigError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        _cached = AppConfig()
    return _cached


def save_config(cfg: AppConfig) -> None:
    global _cached
    cfg = _validated(cfg)
    _cached = cfg
    data = {
        "default_inflation_rate": float(cfg.default_inflation_rate),
        "log_level": cfg.log_level,
    }
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def reset_config_cache() -> None:
    global _cached
    _cached = None
