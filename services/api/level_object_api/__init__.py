"""Level object API service."""
