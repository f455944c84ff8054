"""Central configuration for docfacts."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_app_name() -> str:
    """Get application name."""
    return "docfacts"


def get_app_version() -> str:
    """Get application version from pyproject.toml."""
    try:
        import tomli
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomli.load(f)
            return pyproject.get("project", {}).get("version", "0.1.0")
    except Exception:
        # Installed without the source tree next to it
        return "0.1.0"


def get_profile_name() -> str:
    """Get name of the configuration profile to activate at startup.

    Returns:
        Profile name from DOCFACTS_PROFILE environment variable, default "default"
    """
    name = os.getenv("DOCFACTS_PROFILE", "").strip()
    return name or "default"


def get_profiles_dir_override() -> Optional[Path]:
    """Get profiles directory from DOCFACTS_PROFILES_DIR, or None if unset."""
    env_path = os.getenv("DOCFACTS_PROFILES_DIR")
    if env_path:
        return Path(env_path)
    return None


def get_log_level(verbose: bool = False) -> int:
    """Get log level for entry points.

    Args:
        verbose: Force DEBUG regardless of environment

    Returns:
        logging level from DOCFACTS_LOG_LEVEL (default INFO)
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv("DOCFACTS_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Invalid DOCFACTS_LOG_LEVEL: {name}, using 'INFO'")
        return logging.INFO
    return level


__all__ = [
    "get_app_name",
    "get_app_version",
    "get_profile_name",
    "get_profiles_dir_override",
    "get_log_level",
]
