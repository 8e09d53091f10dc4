"""Configuration module: email directory and mail domain settings."""

from typing import Dict, Any, Optional
from ..resolvers.directory import DirectoryEmailResolver
from .manager import load_config, save_config
from .paths import get_user_config_path, get_project_config_path

__all__ = [
    "load_config",
    "save_config",
    "load_email_resolver",
    "get_user_config_path",
    "get_project_config_path",
]


def load_email_resolver(config_path: Optional[str] = None, config: Optional[Dict[str, Any]] = None) -> DirectoryEmailResolver:
    """
    Build the email directory from configuration.
    
    Args:
        config_path: Path to config YAML file (ignored when config is given)
        config: Already loaded configuration dictionary
        
    Returns:
        Email resolver for the configured directory
        
    Raises:
        ConfigError: If config cannot be loaded or has the wrong shape
    """
    if config is None:
        config = load_config(config_path)
    return DirectoryEmailResolver.from_config(config)
