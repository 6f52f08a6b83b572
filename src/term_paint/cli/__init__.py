"""Command-line interface and interactive editor."""
