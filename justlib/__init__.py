"""Building blocks for a justfile command runner: search, tokens, strings, scopes and settings."""

__version__ = "0.1.0"