"""Command-line interface for eclair."""
