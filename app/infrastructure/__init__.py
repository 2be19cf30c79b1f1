"""Infrastructure adapters: persistence, security and external services."""
