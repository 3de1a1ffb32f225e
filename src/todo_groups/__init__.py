"""Grouped to-do lists with an active tab and an archive of completed groups."""

__version__ = "0.1.0"
