"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers shared by the UI framework and the pytest hooks.

Features:
- Screenshot attachment from disk or raw bytes
- Text attachment (current URL, error summaries)

================================================================================
"""

from pathlib import Path
from typing import Union

import allure


def attach_screenshot(source: Union[Path, str, bytes], name: str = "Screenshot") -> None:
    """
    Attach a PNG screenshot to the Allure report.

    Args:
        source: Path of a PNG file on disk, or the PNG bytes themselves
        name: Attachment name
    """
    if isinstance(source, (bytes, bytearray)):
        allure.attach(
            bytes(source),
            name=name,
            attachment_type=allure.attachment_type.PNG
        )
        return
    allure.attach.file(
        str(source),
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )
