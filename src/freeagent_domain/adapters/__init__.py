"""Adaptadores de I/O: codec JSON y exportación a disco."""
