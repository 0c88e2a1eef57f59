"""Domain models and pure rule functions."""
