"""Command-line interface for finansync."""
