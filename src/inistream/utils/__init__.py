"""Utility modules for inistream.

Provides:
- logger: get_logger for logging
"""

from inistream.utils.logger import get_logger

__all__ = ["get_logger"]
