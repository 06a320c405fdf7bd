"""Window (letter) schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from letterhouse.core.catalog import CHARACTERS, FRAMES, HEX_COLOR


class WindowCreate(BaseModel):
    """Schema for a visitor's new window and letter."""

    character_type: str
    frame_design: str
    background_color: str = "#FFFFFF"
    visitor_name: str = Field(..., min_length=1, max_length=100)
    letter_content: str = Field(..., min_length=1, max_length=5000)

    @field_validator("character_type")
    @classmethod
    def check_character(cls, value: str) -> str:
        if value not in CHARACTERS:
            raise ValueError(f"Unknown character: {value}")
        return value

    @field_validator("frame_design")
    @classmethod
    def check_frame(cls, value: str) -> str:
        if value not in FRAMES:
            raise ValueError(f"Unknown frame: {value}")
        return value

    @field_validator("background_color")
    @classmethod
    def check_color(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError("background_color must look like #RRGGBB")
        return value.upper()

    @field_validator("visitor_name", "letter_content")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class WindowResponse(BaseModel):
    """A window as shown on the house.

    ``visitor_name`` and ``letter_content`` are only filled in for the owner
    once the house's Christmas has passed.
    """

    id: str
    house_id: str
    grid_position: int
    character_type: str
    frame_design: str
    background_color: str
    created_at: datetime
    character_asset: str
    frame_asset: str
    locked: bool = True
    visitor_name: Optional[str] = None
    letter_content: Optional[str] = None


class WindowPageResponse(BaseModel):
    page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    total_windows: int
    windows: list[WindowResponse] = []


class LetterResponse(BaseModel):
    window_id: str
    visitor_name: str
    letter_content: str
    created_at: datetime
