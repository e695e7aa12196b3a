"""
Configuration management for InsuraPro.

Loads config.yaml and provides type-safe access to settings.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Config file lives alongside the insurapro package modules
_PACKAGE_DIR = Path(__file__).parent.parent.resolve()
CONFIG_PATH = _PACKAGE_DIR / "config.yaml"

# Cache for loaded config
_config_cache: Optional[Dict[str, Any]] = None


def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        reload: Force reload even if cached

    Returns:
        Configuration dictionary
    """
    global _config_cache

    if _config_cache is not None and not reload:
        return _config_cache

    if not CONFIG_PATH.exists():
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache


def get_config_value(*keys: str, default: Any = None) -> Any:
    """
    Get a nested config value safely.

    Args:
        *keys: Path of keys to traverse (e.g., 'storage', 'customers_file')
        default: Value to return if key not found

    Example:
        encoding = get_config_value('storage', 'encoding', default='utf-8')
    """
    config = get_config()

    for key in keys:
        if isinstance(config, dict) and key in config:
            config = config[key]
        else:
            return default

    return config


class CRMPaths:
    """
    Centralized path access for the CRM.

    All paths are loaded from config.yaml with sensible fallbacks.

    Usage:
        from insurapro.core.config import CRM_PATHS
        path = CRM_PATHS.customers_file
    """

    def __init__(self):
        self._config = None

    def _ensure_config(self):
        if self._config is None:
            self._config = get_config()

    @property
    def customers_file(self) -> Path:
        self._ensure_config()
        path = Path(self._config.get("storage", {}).get("customers_file", "customers.csv"))
        if not path.is_absolute():
            path = Path.cwd() / path
        return path

    @property
    def encoding(self) -> str:
        self._ensure_config()
        return self._config.get("storage", {}).get("encoding", "utf-8")


# Singleton instance
CRM_PATHS = CRMPaths()
