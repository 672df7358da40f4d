"""Caller authentication for the HTTP API."""

from .dependencies import get_current_principal

__all__ = ["get_current_principal"]
