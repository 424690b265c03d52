"""Async client for the Assembla REST API."""

__version__ = "0.1.0"
