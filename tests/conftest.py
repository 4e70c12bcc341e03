"""Pytest configuration for feedwire test suite."""

import os

# Ensure test environment variables are set before any imports
os.environ.setdefault("FEEDWIRE_LOG_LEVEL", "warning")
os.environ.setdefault("FEEDWIRE_EMITTER_CHAIN", "26")
os.environ.setdefault("FEEDWIRE_BINARY_ENCODING", "hex")
