"""FastAPI application for the store rating service."""
