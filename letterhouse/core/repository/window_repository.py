"""Repository for windows (letters)."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from letterhouse.core.database import Window

from .base_repository import BaseRepository


class WindowRepository(BaseRepository[Window]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Window)

    async def list_by_house(self, house_id: str) -> List[Window]:
        """All windows of a house in grid order."""
        stmt = (
            select(Window)
            .filter(Window.house_id == house_id)
            .order_by(Window.grid_position)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def positions_for_house(self, house_id: str) -> List[int]:
        """Grid positions currently taken on a house."""
        result = await self.db.execute(
            select(Window.grid_position).filter(Window.house_id == house_id)
        )
        return list(result.scalars().all())

    async def get_in_house(self, house_id: str, window_id: str) -> Optional[Window]:
        """Get a window only if it hangs on ``house_id``."""
        result = await self.db.execute(
            select(Window).filter(Window.house_id == house_id, Window.id == window_id)
        )
        return result.scalar_one_or_none()
