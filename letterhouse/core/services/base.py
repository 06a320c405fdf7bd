from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base class for all services."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    @abstractmethod
    def from_db(cls, db: AsyncSession) -> "BaseService":
        """Factory method to create service instance."""
        pass

