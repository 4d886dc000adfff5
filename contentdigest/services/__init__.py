"""Service implementations registered by the bootstrap."""
