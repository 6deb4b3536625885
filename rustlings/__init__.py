"""Guided exercises with a command that compiles, tests and tracks progress."""

__version__ = "4.5.0"