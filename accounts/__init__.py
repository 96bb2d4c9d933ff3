"""User accounts and session authentication service."""

__version__ = "0.1.0"
