"""
Global configuration for the smaz codec.

This module contains environment-driven settings. The codec itself has no
tunables: the wire format is fixed. Settings here only affect tooling.
"""

import os

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]

SMAZ_LOG_LEVEL = os.environ.get("SMAZ_LOG_LEVEL", "WARNING").upper()
"""Log level used by the command-line tool. Defaults to 'WARNING'."""

if SMAZ_LOG_LEVEL not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid SMAZ_LOG_LEVEL environment variable: '{SMAZ_LOG_LEVEL}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )
