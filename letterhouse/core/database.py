"""Database configuration and models."""

import uuid
from datetime import datetime, timezone

from loguru import logger
from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base, relationship

from letterhouse.core.config import get_settings

settings = get_settings()


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


engine = create_async_engine(
    settings.database_url, echo=settings.db_echo, **_engine_kwargs(settings.database_url)
)

# Create async session factory
async_session_maker = async_sessionmaker(bind=engine, expire_on_commit=False)

# Create base class for models
Base = declarative_base()


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class House(Base):
    """A user's house. One per owner."""

    __tablename__ = "houses"

    id = Column(String, primary_key=True, default=generate_uuid)
    owner_id = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    house_type = Column(String, nullable=False, default="house1")
    timezone = Column(String, nullable=False, default="America/New_York")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    windows = relationship(
        "Window", back_populates="house", cascade="all, delete-orphan"
    )


class Window(Base):
    """A visitor's letter, shown as a window on the house."""

    __tablename__ = "windows"
    __table_args__ = (
        UniqueConstraint("house_id", "grid_position", name="uq_window_house_position"),
    )

    id = Column(String, primary_key=True, default=generate_uuid)
    house_id = Column(
        String, ForeignKey("houses.id", ondelete="CASCADE"), index=True, nullable=False
    )
    grid_position = Column(Integer, nullable=False)
    character_type = Column(String, nullable=False)
    frame_design = Column(String, nullable=False)
    background_color = Column(String, nullable=False, default="#FFFFFF")
    visitor_name = Column(String, nullable=False)
    letter_content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    house = relationship("House", back_populates="windows")


async def init_db():
    """Create tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
