"""Command logic for a playful chat bot: strikes, configuration, anon messages, timestamps, games and analytics."""

__version__ = "1.0.0"