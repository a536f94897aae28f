"""Helpers shared by the level object API service and the migration job."""
