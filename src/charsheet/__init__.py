"""Character sheet rules engine with remote roster persistence."""

__version__ = "0.1.0"
