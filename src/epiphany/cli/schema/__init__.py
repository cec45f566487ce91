"""Schema registry inspection commands."""
