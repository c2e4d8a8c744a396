"""Dessert Pusher — click desserts, sell desserts, unlock better desserts."""

__version__ = "1.0.0"
