"""
================================================================================
Storefront Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config / set_config: dot-path configuration access
    - init_logger: Loguru setup with standard settings
    - env_flag / env_int: typed environment variable readers

Usage:
    from storefront_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

from .global_config import (
    ConfigurationError,
    env_flag,
    env_int,
    get_config,
    init_logger,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "env_flag",
    "env_int",
    "get_config",
    "init_logger",
    "set_config",
]
