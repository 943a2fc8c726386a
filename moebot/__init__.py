"""Command parsing, message formatting and game logic for a community chat bot."""

__version__ = "0.6.1"