"""Utility modules for CLI output."""

from utils.logging_helpers import log_error_section

__all__ = [
    "log_error_section",
]
