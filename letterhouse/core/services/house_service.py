from datetime import datetime
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from letterhouse.schemas.auth import CurrentUser
from letterhouse.schemas.countdown import CountdownResponse
from letterhouse.schemas.house import HouseCreate, HouseResponse, HouseUpdate

from .. import christmas
from ..auth import UserRole, resolve_role
from ..catalog import house_asset_path
from ..database import House
from ..dependencies import register_service
from ..errors import AuthorizationError, ConflictError, NotFoundError
from ..layout import family_for
from ..repository import HouseRepository
from .base import BaseService


@register_service
class HouseService(BaseService):
    """Houses: one per owner, with a template and a timezone."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.repo = HouseRepository(db)

    @classmethod
    def from_db(cls, db: AsyncSession) -> "HouseService":
        return cls(db)

    async def create_house(self, owner: CurrentUser, data: HouseCreate) -> House:
        """Create the caller's house.

        Raises:
            InvalidTimezone: If ``data.timezone`` is unknown
            ConflictError: If the caller already owns a house
        """
        christmas.resolve_timezone(data.timezone)

        if await self.repo.get_by_owner(owner.id):
            raise ConflictError("You already have a house")

        house = House(
            owner_id=owner.id,
            name=data.name,
            house_type=data.house_type,
            timezone=data.timezone,
        )
        try:
            house = await self.repo.create(house)
        except IntegrityError as e:
            raise ConflictError("You already have a house") from e

        logger.info(f"Created house {house.id} ({house.house_type}) for owner {owner.id}")
        return house

    async def get_house(self, house_id: str) -> House:
        house = await self.repo.get_by_id(house_id)
        if not house:
            raise NotFoundError("House", house_id)
        return house

    async def get_house_for_owner(self, owner_id: str) -> House:
        house = await self.repo.get_by_owner(owner_id)
        if not house:
            raise NotFoundError("House")
        return house

    async def update_house(
        self, house_id: str, user: Optional[CurrentUser], data: HouseUpdate
    ) -> House:
        """Update name, template or timezone. Owner only."""
        house = await self.get_house(house_id)
        if resolve_role(house.owner_id, user) != UserRole.OWNER:
            raise AuthorizationError("Only the owner can update this house")

        values = data.model_dump(exclude_unset=True, exclude_none=True)
        if "timezone" in values:
            christmas.resolve_timezone(values["timezone"])

        house = await self.repo.update(house, values)
        logger.info(f"Updated house {house.id}: {sorted(values)}")
        return house

    async def countdown(
        self, house_id: str, reference: Optional[datetime] = None
    ) -> CountdownResponse:
        """Countdown to the house's next Christmas and its letter gate."""
        house = await self.get_house(house_id)
        return build_countdown(house, christmas.time_remaining(house.timezone, reference), reference)


def build_countdown(
    house: House, countdown: christmas.Countdown, reference: Optional[datetime] = None
) -> CountdownResponse:
    return CountdownResponse(
        timezone=house.timezone,
        days=countdown.days,
        hours=countdown.hours,
        minutes=countdown.minutes,
        seconds=countdown.seconds,
        has_passed=countdown.has_passed,
        target=countdown.target,
        target_year=countdown.target.year,
        is_christmas_day=christmas.is_christmas_day(house.timezone, reference),
        letters_unlocked=christmas.has_christmas_passed(
            house.timezone, house.created_at, reference
        ),
        reveal_at=christmas.reveal_instant(house.timezone, house.created_at),
    )


def describe_house(house: House, role: UserRole = UserRole.VISITOR) -> HouseResponse:
    return HouseResponse(
        id=house.id,
        owner_id=house.owner_id,
        name=house.name,
        house_type=house.house_type,
        timezone=house.timezone,
        created_at=house.created_at,
        updated_at=house.updated_at,
        family=family_for(house.house_type).value,
        asset=house_asset_path(house.house_type),
        role=role.value,
    )
