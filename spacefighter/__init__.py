"""Game rules for a vertical space shooter: vectors, masks, particles, ships, weapons and levels."""

__version__ = "0.1.0"