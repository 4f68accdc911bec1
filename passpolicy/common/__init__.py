"""Common utilities for passpolicy.

Policy file loading lives in ``passpolicy.common.config``.
"""

from .logger import setup_logger, get_logger
from .settings import Settings, get_settings

__all__ = ["Settings", "get_logger", "get_settings", "setup_logger"]
