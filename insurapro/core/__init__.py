"""
InsuraPro Core - Shared services for all modules.

Usage:
    from insurapro.core import get_config, get_logger, CRM_PATHS
"""

from insurapro.core.config import get_config, get_config_value, CRM_PATHS
from insurapro.core.logging import get_logger

__all__ = [
    "get_config",
    "get_config_value",
    "CRM_PATHS",
    "get_logger",
]
