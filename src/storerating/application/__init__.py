"""Application layer: commands, queries and read models."""
