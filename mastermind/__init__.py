"""Mastermind: local and API-backed text game."""

__version__ = "1.0.0"
