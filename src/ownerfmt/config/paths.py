"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional


def get_defaults_path() -> Path:
    """Get packaged defaults path."""
    return Path(__file__).parent / "defaults.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.ownerfmt/config.yaml"""
    return Path.home() / ".ownerfmt" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .ownerfmt/config.yaml (from current working directory)"""
    project_config = Path.cwd() / ".ownerfmt" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
