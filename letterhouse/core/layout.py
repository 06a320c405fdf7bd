"""House templates and window slot geometry.

Every house template belongs to one of two geometry families. A family has a
design-time canvas width, a "house body" sub-rectangle placed at an offset in
the canvas, and nine window slots (a 3x3 grid) positioned relative to that
body. Each template adds a small nudge on top.

All coordinates here are unscaled design pixels; ``core.viewport`` maps them
to the rendered image.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Tuple

from loguru import logger

from .errors import SlotNotFound

SLOTS_PER_PAGE = 9


class HouseFamily(str, Enum):
    A = "A"
    B = "B"


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    def translate(self, dx: float, dy: float) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True)
class FamilyGeometry:
    """Static geometry shared by all templates of a family."""

    design_width: int
    body_width: int
    body_height: int
    body_left: int
    body_top: int
    slots: Tuple[Rect, ...]


def _grid(columns: Iterable[int], rows: Iterable[int], width: int, height: int):
    return tuple(Rect(left, top, width, height) for top in rows for left in columns)


GEOMETRIES: Dict[HouseFamily, FamilyGeometry] = {
    HouseFamily.A: FamilyGeometry(
        design_width=398,
        body_width=340,
        body_height=672,
        body_left=29,
        body_top=96,
        slots=_grid((32, 132, 232), (100, 240, 380), 76, 102),
    ),
    HouseFamily.B: FamilyGeometry(
        design_width=396,
        body_width=300,
        body_height=561,
        body_left=48,
        body_top=219,
        slots=_grid((15, 115, 215), (40, 170, 300), 70, 95),
    ),
}

TEMPLATE_FAMILIES: Dict[str, HouseFamily] = {
    "house1": HouseFamily.A,
    "house2": HouseFamily.A,
    "house3": HouseFamily.A,
    "house4": HouseFamily.B,
    "house5": HouseFamily.B,
    "house6": HouseFamily.B,
}

# x grows right, negative y moves up
TEMPLATE_NUDGES: Dict[str, Tuple[int, int]] = {
    "house1": (5, -25),
    "house2": (5, -25),
    "house3": (5, -25),
    "house4": (-3, -15),
    "house5": (-3, -15),
    "house6": (-3, -15),
}


def family_for(template_id: str) -> HouseFamily:
    """Map a template identifier to its geometry family.

    Unknown identifiers fall back to family A.
    """
    family = TEMPLATE_FAMILIES.get(template_id)
    if family is None:
        logger.warning(f"Unknown house template {template_id!r}, using family A")
        return HouseFamily.A
    return family


def geometry_for(template_id: str) -> FamilyGeometry:
    return GEOMETRIES[family_for(template_id)]


def nudge_for(template_id: str) -> Tuple[int, int]:
    return TEMPLATE_NUDGES.get(template_id, (0, 0))


def slot_index(position: int) -> int:
    """Within-page slot index for a 1-based grid position."""
    if position < 1:
        raise ValueError(f"Grid positions start at 1, got {position}")
    return (position - 1) % SLOTS_PER_PAGE


def resolve_slot_rect(template_id: str, position: int) -> Rect:
    """Unscaled rectangle of a window in the template's design space.

    Args:
        template_id: House template identifier, e.g. ``"house4"``
        position: 1-based sequential grid position

    Returns:
        Slot rectangle shifted by the body offset and the template nudge

    Raises:
        ValueError: If ``position`` is below 1
        SlotNotFound: If the slot table has no entry for the computed index
    """
    geometry = geometry_for(template_id)
    index = slot_index(position)
    if index >= len(geometry.slots):
        raise SlotNotFound(template_id, position)

    dx, dy = nudge_for(template_id)
    return geometry.slots[index].translate(geometry.body_left + dx, geometry.body_top + dy)


def next_grid_position(existing_positions: Iterable[int]) -> int:
    """Smallest positive position not already taken.

    >>> next_grid_position([1, 2, 4])
    3
    """
    taken = set(existing_positions)
    position = 1
    while position in taken:
        position += 1
    return position
