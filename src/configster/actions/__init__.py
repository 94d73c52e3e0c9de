"""Actions package - Output layer for parsed configuration files."""

from configster.actions.reporters import get_reporter

__all__ = ["get_reporter"]
