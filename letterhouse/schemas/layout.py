from pydantic import BaseModel

from .window import WindowResponse


class RectOut(BaseModel):
    left: float
    top: float
    width: float
    height: float


class OffsetOut(BaseModel):
    left: float
    top: float


class PlacedWindow(BaseModel):
    window: WindowResponse
    rect: RectOut


class LayoutResponse(BaseModel):
    """On-screen rectangles for one page of windows."""

    house_id: str
    house_type: str
    family: str
    design_width: int
    device_class: str
    scale: float
    offset: OffsetOut
    page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    windows: list[PlacedWindow] = []
