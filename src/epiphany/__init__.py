"""
Epiphany - tokenizer schema registry

Loads entity type and intent type definitions from the Epiphany JSON
library (or from your own code) and exposes them to the tokenizer's
matching engine.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
