"""Application layer - use cases and scheduling."""
