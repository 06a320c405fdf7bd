"""On-screen placement of a house's windows."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from letterhouse.core.auth import get_optional_user
from letterhouse.core.dependencies import get_service
from letterhouse.core.errors import ServiceError
from letterhouse.core.services import WindowService
from letterhouse.schemas.auth import CurrentUser
from letterhouse.schemas.layout import LayoutResponse

router = APIRouter()


@router.get("/{house_id}/layout", response_model=LayoutResponse)
async def get_layout(
    house_id: str,
    page: int = 1,
    rendered_width: Optional[float] = Query(None, gt=0),
    viewport_width: Optional[float] = Query(None, gt=0),
    container_left: float = 0.0,
    container_top: float = 0.0,
    image_left: float = 0.0,
    image_top: float = 0.0,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    window_service: WindowService = Depends(get_service(WindowService)),
):
    """Rectangles for one page of windows, scaled to the rendered house image."""
    try:
        return await window_service.layout_page(
            house_id,
            page,
            user,
            rendered_width=rendered_width,
            viewport_width=viewport_width,
            container_origin=(container_left, container_top),
            image_origin=(image_left, image_top),
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
