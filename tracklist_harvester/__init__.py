"""Harvest and deduplicate NTS show tracklists with resumable checkpoints."""

__version__ = "0.1.0"
