"""HTTP API for YouTube synthesis."""
