"""One-shot schema migration job for the level object database."""
