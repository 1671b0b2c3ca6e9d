"""FreeAgent API v2 resource model layer."""

__version__ = "0.1.0"
