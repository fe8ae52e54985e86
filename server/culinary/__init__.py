"""Culinary Haven recipe service."""

__version__ = "0.1.0"
