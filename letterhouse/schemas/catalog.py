from pydantic import BaseModel


class TemplateOut(BaseModel):
    id: str
    family: str
    design_width: int
    asset: str


class CharacterOut(BaseModel):
    id: str
    asset: str


class FrameOut(BaseModel):
    id: str
    asset: str


class TimezoneOut(BaseModel):
    id: str
    label: str


class CatalogResponse(BaseModel):
    """Everything the house setup and letter screens offer."""

    templates: list[TemplateOut]
    characters: list[CharacterOut]
    frames: list[FrameOut]
    colors: list[str]
    timezones: list[TimezoneOut]
    default_template: str
    default_timezone: str
