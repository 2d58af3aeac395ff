"""roadctl — city, road, and road-budget registry CLI."""

__version__ = "0.1.0"
