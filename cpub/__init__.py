"""Publish library modules to Maven repositories."""

__version__ = "1.0.0"
