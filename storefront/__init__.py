"""HMNS storefront - catalog filtering and view rendering service."""

__version__ = "0.1.0"
