"""Repository package for database operations."""

from .base_repository import BaseRepository
from .house_repository import HouseRepository
from .window_repository import WindowRepository

__all__ = [
    "BaseRepository",
    "HouseRepository",
    "WindowRepository",
]
