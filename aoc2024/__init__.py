"""Solutions to the 2024 puzzle calendar, one module per day, with shared helpers."""

__version__ = "0.1.0"