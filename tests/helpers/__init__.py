"""Shared helpers for the Epiphany test suite."""
