"""Shared constants, configuration and logging."""
