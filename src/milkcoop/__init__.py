"""Milk collection cooperative API."""

__version__ = "1.0.0"
