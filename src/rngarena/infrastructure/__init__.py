"""Infrastructure adapters for rngarena."""
