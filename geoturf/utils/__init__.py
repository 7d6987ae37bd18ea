"""Shared helper functions (unit conversion)."""
