from contextlib import asynccontextmanager
from typing import Callable, Type, TypeVar

from fastapi import Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from .database import async_session_maker

T = TypeVar("T")

_service_registry = {}


@asynccontextmanager
async def get_db():
    """
    Dependency to get a database session in an async context
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db_session():
    """
    Dependency to get a database session in a Depends
    """
    async with get_db() as session:
        yield session


def register_service(service_class: Type[T]) -> Type[T]:
    """Register a service class; instances are built with its ``from_db``."""
    _service_registry[service_class] = service_class.from_db
    return service_class


def get_service(service_class: Type[T]) -> Callable[[AsyncSession], T]:
    """Dependency injector for services"""

    def factory(db: AsyncSession = Depends(get_db_session)) -> T:
        if service_class not in _service_registry:
            raise ValueError(f"Service {service_class.__name__} not registered")
        logger.debug(f"Creating service {service_class.__name__}")
        return _service_registry[service_class](db)

    return factory
