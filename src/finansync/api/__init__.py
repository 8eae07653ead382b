"""HTTP API for finansync."""
