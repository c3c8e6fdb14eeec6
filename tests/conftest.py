"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "SMAZ_LOG_LEVEL" not in os.environ:
    os.environ["SMAZ_LOG_LEVEL"] = "DEBUG"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
