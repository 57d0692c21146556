"""Version information for l10nlint-review."""
__version__ = "0.3.0"
