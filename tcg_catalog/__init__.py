"""Pokemon TCG catalog service."""
