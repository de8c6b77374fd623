"""Shared helpers (environment flags, exception tree)."""
