"""Closed sets the client picks from, and the asset paths that go with them."""

import re
from typing import Dict, List
from urllib.parse import quote

from .layout import GEOMETRIES, TEMPLATE_FAMILIES, family_for

ASSET_ROOT = "/assets"

HOUSE_FILES: Dict[str, str] = {
    "house1": "house A1",
    "house2": "house A2",
    "house3": "house A3",
    "house4": "house B1",
    "house5": "house B2",
    "house6": "house B3",
}

# There is no artwork for character 7.
CHARACTER_NUMBERS: List[int] = [n for n in range(1, 23) if n != 7]
CHARACTERS: List[str] = [f"character{n}" for n in CHARACTER_NUMBERS]

FRAMES: List[str] = ["window1", "window1b", "window2", "window2b", "window3", "window3b"]

PRESET_COLORS: List[str] = [
    "#FFFFFF", "#FFE4E1", "#FFF0F5", "#E6E6FA", "#F0F8FF", "#E0F6FF",
    "#F0FFF0", "#FFFACD", "#FFE4B5", "#FFDAB9", "#FFC0CB", "#DDA0DD",
    "#98D8C8", "#F7DC6F", "#AED6F1", "#A3E4D7", "#F8C471", "#F1948A",
]

TIMEZONES: Dict[str, str] = {
    "America/New_York": "Eastern Time (ET)",
    "America/Chicago": "Central Time (CT)",
    "America/Denver": "Mountain Time (MT)",
    "America/Los_Angeles": "Pacific Time (PT)",
    "America/Anchorage": "Alaska Time (AKT)",
    "Pacific/Honolulu": "Hawaii Time (HST)",
    "Europe/London": "London (GMT)",
    "Europe/Paris": "Paris (CET)",
    "Asia/Tokyo": "Tokyo (JST)",
    "Australia/Sydney": "Sydney (AEDT)",
    "UTC": "UTC",
}
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_TEMPLATE = "house1"

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def asset_path(kind: str, name: str, extension: str = "svg") -> str:
    """URL of an asset, e.g. ``asset_path("frame", "window1")``."""
    return f"{ASSET_ROOT}/{kind}s/{quote(name)}.{extension}"


def house_asset_path(template_id: str, extension: str = "svg") -> str:
    return asset_path("house", HOUSE_FILES.get(template_id, template_id), extension)


def character_asset_path(character_id: str, extension: str = "svg") -> str:
    # character3 is stored on disk as "Frame 3"
    return asset_path("character", character_id.replace("character", "Frame "), extension)


def frame_asset_path(frame_id: str, extension: str = "svg") -> str:
    return asset_path("frame", frame_id, extension)


def is_known_template(template_id: str) -> bool:
    return template_id in TEMPLATE_FAMILIES


def templates() -> List[dict]:
    """Template descriptions for the house setup screen."""
    result = []
    for template_id in HOUSE_FILES:
        family = family_for(template_id)
        result.append(
            {
                "id": template_id,
                "family": family.value,
                "design_width": GEOMETRIES[family].design_width,
                "asset": house_asset_path(template_id),
            }
        )
    return result
