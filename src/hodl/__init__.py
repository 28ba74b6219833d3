"""hodl: buy low, sell high."""

__version__ = "0.1.0"
