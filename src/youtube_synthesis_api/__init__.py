"""FastAPI backend for YouTube synthesis."""
