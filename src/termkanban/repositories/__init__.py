"""Repository layer for data access."""

from .json_file import JsonFileRepository
from .protocol import StorageProtocol

__all__ = ["JsonFileRepository", "StorageProtocol"]
