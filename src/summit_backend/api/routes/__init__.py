"""Route group exports."""

from . import backend, health, poi

__all__ = ["backend", "health", "poi"]
