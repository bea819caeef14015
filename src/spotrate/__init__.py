"""Parking rate lookup service."""

__version__ = "0.1.0"
