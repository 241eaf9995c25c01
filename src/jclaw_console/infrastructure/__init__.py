"""Infrastructure adapters for the operator console."""
