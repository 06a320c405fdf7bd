"""Repository for houses."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from letterhouse.core.database import House

from .base_repository import BaseRepository


class HouseRepository(BaseRepository[House]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, House)

    async def get_by_owner(self, owner_id: str) -> Optional[House]:
        """Get the house belonging to ``owner_id``, if any."""
        result = await self.db.execute(select(House).filter(House.owner_id == owner_id))
        return result.scalar_one_or_none()
