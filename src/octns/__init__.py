"""octns: human-readable .oct names over Octra addresses."""

__version__ = "0.1.0"
