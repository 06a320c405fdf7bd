"""House schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from letterhouse.core.catalog import DEFAULT_TEMPLATE, DEFAULT_TIMEZONE, is_known_template


def _clean_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("House name must not be blank")
    return value


def _check_template(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_known_template(value):
        raise ValueError(f"Unknown house template: {value}")
    return value


class HouseBase(BaseModel):
    """Base schema for houses."""

    name: str = Field(..., min_length=1, max_length=100)
    house_type: str = DEFAULT_TEMPLATE
    timezone: str = DEFAULT_TIMEZONE

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return _clean_name(value)

    @field_validator("house_type")
    @classmethod
    def check_house_type(cls, value: str) -> str:
        return _check_template(value)


class HouseCreate(HouseBase):
    """Schema for creating houses."""

    pass


class HouseUpdate(BaseModel):
    """Schema for updating houses."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    house_type: Optional[str] = None
    timezone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        return _clean_name(value)

    @field_validator("house_type")
    @classmethod
    def check_house_type(cls, value: Optional[str]) -> Optional[str]:
        return _check_template(value)


class HouseResponse(BaseModel):
    """Schema for retrieving houses."""

    id: str
    owner_id: str
    name: str
    house_type: str
    timezone: str
    created_at: datetime
    updated_at: datetime
    family: str
    asset: str
    role: str = "visitor"

    class Config:
        """Pydantic config."""

        from_attributes = True
