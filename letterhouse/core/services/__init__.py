"""Service layer initialization."""

from .base import BaseService
from .house_service import HouseService, build_countdown, describe_house
from .window_service import WindowService, describe_window

__all__ = [
    "BaseService",
    "HouseService",
    "WindowService",
    "build_countdown",
    "describe_house",
    "describe_window",
]
