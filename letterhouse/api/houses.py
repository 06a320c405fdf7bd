"""Routes for creating and managing houses."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from letterhouse.core.auth import UserRole, get_current_user, get_optional_user, resolve_role
from letterhouse.core.dependencies import get_service
from letterhouse.core.errors import ServiceError
from letterhouse.core.services import HouseService, describe_house
from letterhouse.schemas.auth import CurrentUser
from letterhouse.schemas.house import HouseCreate, HouseResponse, HouseUpdate

router = APIRouter()


@router.post("", response_model=HouseResponse, status_code=status.HTTP_201_CREATED)
async def create_house(
    house_data: HouseCreate,
    user: CurrentUser = Depends(get_current_user),
    house_service: HouseService = Depends(get_service(HouseService)),
):
    """Create the caller's house. Each user owns at most one."""
    try:
        house = await house_service.create_house(user, house_data)
        return describe_house(house, UserRole.OWNER)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/me", response_model=HouseResponse)
async def get_my_house(
    user: CurrentUser = Depends(get_current_user),
    house_service: HouseService = Depends(get_service(HouseService)),
):
    try:
        house = await house_service.get_house_for_owner(user.id)
        return describe_house(house, UserRole.OWNER)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{house_id}", response_model=HouseResponse)
async def get_house(
    house_id: str,
    user: Optional[CurrentUser] = Depends(get_optional_user),
    house_service: HouseService = Depends(get_service(HouseService)),
):
    """Get a house together with the caller's role on it."""
    try:
        house = await house_service.get_house(house_id)
        return describe_house(house, resolve_role(house.owner_id, user))
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{house_id}", response_model=HouseResponse)
async def update_house(
    house_id: str,
    house_data: HouseUpdate,
    user: CurrentUser = Depends(get_current_user),
    house_service: HouseService = Depends(get_service(HouseService)),
):
    """Update a house (owner only)."""
    try:
        house = await house_service.update_house(house_id, user, house_data)
        return describe_house(house, UserRole.OWNER)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
