"""Shared utilities for Breathwork."""

from breathwork.core.utils.json import read_json, write_json
from breathwork.core.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "read_json",
    "write_json",
]
