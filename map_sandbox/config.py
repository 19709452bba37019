# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file.
#   Provides a typed config object to the sandbox and sets up logging.
#
# CLASSES:
# --------
# - SandboxConfig (dataclass)
#     log_level: str       (default "WARNING")
#     log_mutations: bool  (default False)
#
# FUNCTIONS:
# ----------
# - get_config() -> SandboxConfig
#     Load .env using python-dotenv, construct SandboxConfig.
#     Returns the same singleton on repeated calls.
#
# - configure_logging(config: SandboxConfig | None = None) -> None
#     Apply the configured log level to the root logger.
#
# USAGE:
# ------
#   from map_sandbox.config import get_config
#   config = get_config()
#   print(config.log_level)
#
# ==============================================

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


TRUTHY_VARIANTS = {"1", "true", "yes", "on"}


@dataclass
class SandboxConfig:
    """Sandbox configuration."""
    log_level: str = "WARNING"
    log_mutations: bool = False


# Singleton instance
_config_instance: Optional[SandboxConfig] = None


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY_VARIANTS


def get_config() -> SandboxConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        SandboxConfig: Sandbox configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    _config_instance = SandboxConfig(
        log_level=os.getenv("MAP_SANDBOX_LOG_LEVEL", "WARNING").strip().upper(),
        log_mutations=_env_flag("MAP_SANDBOX_LOG_MUTATIONS"),
    )

    return _config_instance


def configure_logging(config: Optional[SandboxConfig] = None) -> None:
    """
    Configure the root logger from the sandbox configuration.

    Unknown level names fall back to WARNING.

    Args:
        config: Configuration to apply. If None, loads from environment.
    """
    config = config or get_config()
    level = getattr(logging, config.log_level, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
