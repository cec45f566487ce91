"""Epiphany core: configuration, exceptions and the type schema registry."""
