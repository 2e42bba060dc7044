"""Route group exports."""

from . import accounts, health, routes

__all__ = ["accounts", "health", "routes"]
