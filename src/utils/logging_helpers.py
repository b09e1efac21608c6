"""
Logging helper utilities for the imagebump CLI.

Provides consistent formatting for error sections.
"""

import logging
from typing import List, Optional


def log_error_section(
    title: str,
    messages: List[str],
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log an error section with separator lines and multiple messages.

    Args:
        title: Title message for the error section
        messages: List of error messages to display
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters

    Examples:
        >>> log_error_section(
        ...     "Failed to load Dockerfile",
        ...     ["Ubuntu:14.04 is not a valid image", "File: Dockerfile"]
        ... )
        ============================================================
        Failed to load Dockerfile
        Ubuntu:14.04 is not a valid image
        File: Dockerfile
        ============================================================
    """
    if logger is None:
        logger = logging.getLogger()

    logger.error("=" * width)
    logger.error(title)
    for message in messages:
        logger.error(message or "")
    logger.error("=" * width)

