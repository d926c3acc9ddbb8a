"""Public API for implementor tables."""

from .implementor_table import ImplementorTable

__all__ = ["ImplementorTable"]
