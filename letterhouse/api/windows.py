"""Routes for the windows (letters) on a house."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from letterhouse.core.auth import get_current_user, get_optional_user
from letterhouse.core.dependencies import get_service
from letterhouse.core.errors import ServiceError
from letterhouse.core.services import WindowService, describe_window
from letterhouse.schemas.auth import CurrentUser
from letterhouse.schemas.window import (
    LetterResponse,
    WindowCreate,
    WindowPageResponse,
    WindowResponse,
)

router = APIRouter()


@router.get("/{house_id}/windows", response_model=WindowPageResponse)
async def list_windows(
    house_id: str,
    page: int = Query(1, description="1-based page, stale values fall back to 1"),
    user: Optional[CurrentUser] = Depends(get_optional_user),
    window_service: WindowService = Depends(get_service(WindowService)),
):
    try:
        return await window_service.list_page(house_id, page, user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/{house_id}/windows",
    response_model=WindowResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_window(
    house_id: str,
    window_data: WindowCreate,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    window_service: WindowService = Depends(get_service(WindowService)),
):
    """Leave a letter on someone else's house."""
    try:
        window = await window_service.add_window(house_id, window_data, user)
        return describe_window(window)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{house_id}/windows/{window_id}")
async def delete_window(
    house_id: str,
    window_id: str,
    user: CurrentUser = Depends(get_current_user),
    window_service: WindowService = Depends(get_service(WindowService)),
):
    """Delete a window (owner only)."""
    try:
        await window_service.delete_window(house_id, window_id, user)
        return {"status": "success", "message": f"Window {window_id} deleted"}
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{house_id}/windows/{window_id}/letter", response_model=LetterResponse)
async def read_letter(
    house_id: str,
    window_id: str,
    user: CurrentUser = Depends(get_current_user),
    window_service: WindowService = Depends(get_service(WindowService)),
):
    """Read a letter. Owners only, and only after Christmas."""
    try:
        return await window_service.get_letter(house_id, window_id, user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
