"""Lazy classification of HTTP clients into stable categories."""

__version__ = "1.0.0"
