"""A 2D physics sandbox of bouncing balls, a player block and a hoop."""

__version__ = "0.1.0"