"""Infrastructure adapters for the core interfaces."""
