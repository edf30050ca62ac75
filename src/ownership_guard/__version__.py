"""Version information for ownership-guard."""

__version__ = "0.1.0"
