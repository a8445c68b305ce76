"""Rename downloaded Twitch clips after their title and creation time."""

__version__ = "1.0.0"
