from datetime import datetime
from typing import Optional, Tuple

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from letterhouse.schemas.auth import CurrentUser
from letterhouse.schemas.layout import LayoutResponse, OffsetOut, PlacedWindow, RectOut
from letterhouse.schemas.window import (
    LetterResponse,
    WindowCreate,
    WindowPageResponse,
    WindowResponse,
)

from .. import christmas
from ..auth import UserRole, resolve_role
from ..catalog import character_asset_path, frame_asset_path
from ..config import get_settings
from ..database import House, Window
from ..dependencies import register_service
from ..errors import AuthorizationError, ConflictError, NotFoundError, SlotNotFound
from ..layout import family_for, geometry_for, next_grid_position, resolve_slot_rect
from ..pagination import WINDOWS_PER_PAGE, current_page
from ..repository import HouseRepository, WindowRepository
from ..viewport import ViewportScaler
from .base import BaseService


@register_service
class WindowService(BaseService):
    """Windows hung on a house by visitors, each carrying a letter.

    Letter content and the visitor's name leave this service only for the
    house owner, and only after the house's Christmas has passed.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.house_repo = HouseRepository(db)
        self.repo = WindowRepository(db)
        self.settings = get_settings()

    @classmethod
    def from_db(cls, db: AsyncSession) -> "WindowService":
        return cls(db)

    async def _get_house(self, house_id: str) -> House:
        house = await self.house_repo.get_by_id(house_id)
        if not house:
            raise NotFoundError("House", house_id)
        return house

    async def add_window(
        self, house_id: str, data: WindowCreate, user: Optional[CurrentUser] = None
    ) -> Window:
        """Hang a new window on a house at the first free grid position.

        Raises:
            NotFoundError: If the house does not exist
            AuthorizationError: If the caller owns the house
            ConflictError: If another window claimed the position first
        """
        house = await self._get_house(house_id)
        if resolve_role(house.owner_id, user) == UserRole.OWNER:
            raise AuthorizationError("Only visitors can write letters!")

        position = next_grid_position(await self.repo.positions_for_house(house.id))
        window = Window(
            house_id=house.id,
            grid_position=position,
            character_type=data.character_type,
            frame_design=data.frame_design,
            background_color=data.background_color,
            visitor_name=data.visitor_name,
            letter_content=data.letter_content,
        )
        try:
            window = await self.repo.create(window)
        except IntegrityError as e:
            raise ConflictError(
                "Someone else just added a window here, please try again"
            ) from e

        logger.info(f"Added window {window.id} to house {house.id} at position {position}")
        return window

    async def list_page(
        self,
        house_id: str,
        page: int = 1,
        user: Optional[CurrentUser] = None,
        reference: Optional[datetime] = None,
    ) -> WindowPageResponse:
        """One page of a house's windows, with letters gated for the caller."""
        house = await self._get_house(house_id)
        windows = await self.repo.list_by_house(house.id)
        current = current_page(windows, page, WINDOWS_PER_PAGE)
        unlocked = self._letters_visible(house, user, reference)

        return WindowPageResponse(
            page=current.number,
            total_pages=current.total_pages,
            has_previous=current.has_previous,
            has_next=current.has_next,
            total_windows=len(windows),
            windows=[describe_window(window, unlocked) for window in current.items],
        )

    async def delete_window(
        self, house_id: str, window_id: str, user: Optional[CurrentUser]
    ) -> None:
        """Remove a window. Owner only; its position becomes free again."""
        house = await self._get_house(house_id)
        if resolve_role(house.owner_id, user) != UserRole.OWNER:
            raise AuthorizationError("Only the house owner can delete windows")

        window = await self.repo.get_in_house(house.id, window_id)
        if not window:
            raise NotFoundError("Window", window_id)

        await self.repo.delete(window)
        logger.info(f"Deleted window {window_id} from house {house.id}")

    async def get_letter(
        self,
        house_id: str,
        window_id: str,
        user: Optional[CurrentUser],
        reference: Optional[datetime] = None,
    ) -> LetterResponse:
        """Full letter behind a window, once the owner may read it."""
        house = await self._get_house(house_id)
        if resolve_role(house.owner_id, user) != UserRole.OWNER:
            raise AuthorizationError("Only the house owner can read letters")
        if not christmas.has_christmas_passed(house.timezone, house.created_at, reference):
            raise AuthorizationError("Letters stay locked until after Christmas")

        window = await self.repo.get_in_house(house.id, window_id)
        if not window:
            raise NotFoundError("Window", window_id)

        return LetterResponse(
            window_id=window.id,
            visitor_name=window.visitor_name,
            letter_content=window.letter_content,
            created_at=window.created_at,
        )

    async def layout_page(
        self,
        house_id: str,
        page: int = 1,
        user: Optional[CurrentUser] = None,
        rendered_width: Optional[float] = None,
        viewport_width: Optional[float] = None,
        container_origin: Tuple[float, float] = (0.0, 0.0),
        image_origin: Tuple[float, float] = (0.0, 0.0),
        reference: Optional[datetime] = None,
    ) -> LayoutResponse:
        """On-screen rectangles for one page of windows.

        Args:
            house_id: House to lay out
            page: Requested 1-based page, clamped when stale
            user: Caller, decides whether letters are included
            rendered_width: Width the house image is drawn at, defaults to
                the template's design width
            viewport_width: Screen width, used to detect compact devices;
                unknown widths are treated as regular devices
            container_origin: Top-left of the house container
            image_origin: Top-left of the rendered house image
            reference: Instant used for the letter gate, defaults to now

        Returns:
            LayoutResponse; windows whose slot cannot be resolved are left out
        """
        house = await self._get_house(house_id)
        geometry = geometry_for(house.house_type)
        if rendered_width is None:
            rendered_width = geometry.design_width

        scaler = ViewportScaler(
            geometry.design_width,
            compact_threshold=self.settings.compact_viewport_threshold,
            compact_scale=self.settings.compact_scale,
        ).recompute(rendered_width, viewport_width, container_origin, image_origin)

        windows = await self.repo.list_by_house(house.id)
        current = current_page(windows, page, WINDOWS_PER_PAGE)
        unlocked = self._letters_visible(house, user, reference)

        placed = []
        for window in current.items:
            try:
                rect = resolve_slot_rect(house.house_type, window.grid_position)
            except SlotNotFound as e:
                logger.warning(f"Skipping window {window.id}: {e.message}")
                continue
            on_screen = scaler.place(rect)
            placed.append(
                PlacedWindow(
                    window=describe_window(window, unlocked),
                    rect=RectOut(
                        left=on_screen.left,
                        top=on_screen.top,
                        width=on_screen.width,
                        height=on_screen.height,
                    ),
                )
            )

        return LayoutResponse(
            house_id=house.id,
            house_type=house.house_type,
            family=family_for(house.house_type).value,
            design_width=geometry.design_width,
            device_class=scaler.device_class.value,
            scale=scaler.scale,
            offset=OffsetOut(left=scaler.offset.left, top=scaler.offset.top),
            page=current.number,
            total_pages=current.total_pages,
            has_previous=current.has_previous,
            has_next=current.has_next,
            windows=placed,
        )

    @staticmethod
    def _letters_visible(
        house: House, user: Optional[CurrentUser], reference: Optional[datetime]
    ) -> bool:
        role = resolve_role(house.owner_id, user)
        return christmas.can_view_letter(
            role.value, house.timezone, house.created_at, reference
        )


def describe_window(window: Window, unlocked: bool = False) -> WindowResponse:
    """Public view of a window; letter fields only when ``unlocked``."""
    return WindowResponse(
        id=window.id,
        house_id=window.house_id,
        grid_position=window.grid_position,
        character_type=window.character_type,
        frame_design=window.frame_design,
        background_color=window.background_color,
        created_at=window.created_at,
        character_asset=character_asset_path(window.character_type),
        frame_asset=frame_asset_path(window.frame_design),
        locked=not unlocked,
        visitor_name=window.visitor_name if unlocked else None,
        letter_content=window.letter_content if unlocked else None,
    )
