"""Choices offered by the house setup and letter screens."""

from fastapi import APIRouter

from letterhouse.core import catalog
from letterhouse.schemas.catalog import (
    CatalogResponse,
    CharacterOut,
    FrameOut,
    TemplateOut,
    TimezoneOut,
)

router = APIRouter()


@router.get("", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    return CatalogResponse(
        templates=[TemplateOut(**template) for template in catalog.templates()],
        characters=[
            CharacterOut(id=character, asset=catalog.character_asset_path(character))
            for character in catalog.CHARACTERS
        ],
        frames=[
            FrameOut(id=frame, asset=catalog.frame_asset_path(frame))
            for frame in catalog.FRAMES
        ],
        colors=list(catalog.PRESET_COLORS),
        timezones=[
            TimezoneOut(id=name, label=label) for name, label in catalog.TIMEZONES.items()
        ],
        default_template=catalog.DEFAULT_TEMPLATE,
        default_timezone=catalog.DEFAULT_TIMEZONE,
    )
