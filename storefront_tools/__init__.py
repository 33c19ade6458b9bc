"""
================================================================================
Storefront Tools
================================================================================

Infrastructure shared by the storefront test suites.

Modules:
    - common: Configuration (YAML + environment) and Loguru setup
    - report_tools: Allure attachment helpers

Example:
    from storefront_tools.common import get_config, init_logger
    from storefront_tools.report_tools import attach_screenshot

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "0.1.0"

__all__ = [
    "common",
    "report_tools",
]
