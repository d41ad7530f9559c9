"""Client, data models and interactive text menu for the PluralKit API."""

__version__ = "0.1.0"
__all__ = ["models", "config", "http", "api", "tray"]