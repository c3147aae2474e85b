"""Screen components."""

from .board import BoardScreen

__all__ = ["BoardScreen"]
