"""
Settings and logging setup shared by the library and the CLI.
"""

from .config import ConfigurationError, Settings, get_settings, load_settings
from .logging import configure_logging

__all__ = ["ConfigurationError", "Settings", "get_settings", "load_settings", "configure_logging"]
