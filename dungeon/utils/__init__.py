"""Utilities: logging setup and the game event log."""
