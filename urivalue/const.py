"""Constants shared by the urivalue modules."""

MIN_PORT = 0
MAX_PORT = 65535
"""Ports are unsigned 16 bit integers."""
