"""
Path utilities for InsuraPro.

Directory creation and data file resolution.
"""

from pathlib import Path
from typing import Optional, Union

from insurapro.core.config import CRM_PATHS


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating if necessary. Returns path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_customers_file(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the customer file to use.

    Args:
        path: Explicit file (e.g. from --file); relative paths resolve
              against the working directory

    Returns:
        Absolute path, falling back to storage.customers_file from config
    """
    if path is None:
        return CRM_PATHS.customers_file
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path
