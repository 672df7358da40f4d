"""Catalog module: series and the expansions they own."""
