"""Locale Master - translation resolution engine for GUI applications."""

__version__ = "0.1.0"
