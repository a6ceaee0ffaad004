"""Application layer: service wiring, use cases and DTOs."""
