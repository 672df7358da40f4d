"""Catalog application module: serie use cases and their ports."""
