# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate configuration from environment variables /
#   .env file. Provides typed config objects to the rest of the
#   package.
#
# CLASSES:
# --------
# - ScoringConfig (dataclass)
#     prior_mode: str     (default "per_feature")   NB_PRIOR_MODE
#     smoothing: float    (default 1.0)             NB_SMOOTHING
#
# - LoggingConfig (dataclass)
#     level: str              (default "INFO")      NB_LOG_LEVEL
#     log_dir: str | None     (default None)        NB_LOG_DIR
#
# - AppConfig (dataclass)
#     scoring: ScoringConfig
#     logging: LoggingConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton (tests change the environment).
#
# USAGE:
# ------
#   from naive_bayes.config import get_config
#   config = get_config()
#   print(config.scoring.prior_mode)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


PRIOR_MODES = ("per_feature", "none")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ScoringConfig:
    """How classify() scores labels."""
    prior_mode: str = "per_feature"
    smoothing: float = 1.0


@dataclass
class LoggingConfig:
    """Where and how verbosely the package logs."""
    level: str = "INFO"
    log_dir: Optional[str] = None


@dataclass
class AppConfig:
    """Main application configuration."""
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: If a variable holds a value outside its allowed range
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    prior_mode = os.getenv("NB_PRIOR_MODE", "per_feature").strip().lower()
    if prior_mode not in PRIOR_MODES:
        raise ValueError(
            f"NB_PRIOR_MODE must be one of {PRIOR_MODES}, got {prior_mode!r}"
        )

    smoothing = float(os.getenv("NB_SMOOTHING", "1.0"))
    if smoothing <= 0:
        raise ValueError(f"NB_SMOOTHING must be positive, got {smoothing}")

    level = os.getenv("NB_LOG_LEVEL", "INFO").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"NB_LOG_LEVEL must be one of {LOG_LEVELS}, got {level!r}")

    _config_instance = AppConfig(
        scoring=ScoringConfig(prior_mode=prior_mode, smoothing=smoothing),
        logging=LoggingConfig(level=level, log_dir=os.getenv("NB_LOG_DIR") or None),
    )

    return _config_instance


def reset_config() -> None:
    global _config_instance
    _config_instance = None
