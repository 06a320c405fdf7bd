"""Mapping of design-space window rectangles onto the rendered house image."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from loguru import logger

from .layout import Rect

COMPACT_VIEWPORT_THRESHOLD = 768
# Shrinks overlays on small screens. A visual choice, not a physical one.
COMPACT_SCALE = 0.35


class DeviceClass(str, Enum):
    REGULAR = "regular"
    COMPACT = "compact"


@dataclass(frozen=True)
class Offset:
    left: float = 0.0
    top: float = 0.0


def classify_device(
    viewport_width: Optional[float], threshold: int = COMPACT_VIEWPORT_THRESHOLD
) -> DeviceClass:
    """Compact only when the viewport is known to be narrow."""
    if viewport_width is not None and viewport_width <= threshold:
        return DeviceClass.COMPACT
    return DeviceClass.REGULAR


def scale_factor(
    rendered_width: float,
    design_width: float,
    device_class: DeviceClass = DeviceClass.REGULAR,
    compact_scale: float = COMPACT_SCALE,
) -> float:
    """Ratio of rendered to design width, shrunk further on compact devices."""
    if design_width <= 0:
        raise ValueError(f"design_width must be positive, got {design_width}")
    factor = rendered_width / design_width
    if device_class == DeviceClass.COMPACT:
        factor *= compact_scale
    return factor


def image_offset(
    container_origin: Tuple[float, float], image_origin: Tuple[float, float]
) -> Offset:
    """Position of the house image relative to its container."""
    return Offset(
        left=image_origin[0] - container_origin[0],
        top=image_origin[1] - container_origin[1],
    )


def apply(rect: Rect, factor: float, offset: Optional[Offset] = None) -> Rect:
    offset = offset or Offset()
    return Rect(
        left=rect.left * factor + offset.left,
        top=rect.top * factor + offset.top,
        width=rect.width * factor,
        height=rect.height * factor,
    )


def scale(
    rect: Rect,
    rendered_width: float,
    design_width: float,
    device_class: DeviceClass = DeviceClass.REGULAR,
    offset: Optional[Offset] = None,
    compact_scale: float = COMPACT_SCALE,
) -> Rect:
    """Final on-screen rectangle for a design-space rectangle."""
    factor = scale_factor(rendered_width, design_width, device_class, compact_scale)
    return apply(rect, factor, offset)


class ViewportScaler:
    """Keeps the last computed scale/offset pair for one house view.

    Call ``recompute`` whenever the rendered image changes size (resize,
    orientation change, image decode). Recomputing with the same inputs
    yields the same state.
    """

    def __init__(
        self,
        design_width: float,
        compact_threshold: int = COMPACT_VIEWPORT_THRESHOLD,
        compact_scale: float = COMPACT_SCALE,
    ):
        self.design_width = design_width
        self.compact_threshold = compact_threshold
        self.compact_scale = compact_scale
        self.scale = 1.0
        self.offset = Offset()
        self.device_class = DeviceClass.REGULAR

    def recompute(
        self,
        rendered_width: float,
        viewport_width: Optional[float] = None,
        container_origin: Tuple[float, float] = (0.0, 0.0),
        image_origin: Tuple[float, float] = (0.0, 0.0),
    ) -> "ViewportScaler":
        self.device_class = classify_device(viewport_width, self.compact_threshold)
        self.scale = scale_factor(
            rendered_width, self.design_width, self.device_class, self.compact_scale
        )
        self.offset = image_offset(container_origin, image_origin)
        logger.debug(
            "Viewport recomputed: scale={}, device={}, rendered_width={}, design_width={}",
            self.scale,
            self.device_class.value,
            rendered_width,
            self.design_width,
        )
        return self

    def place(self, rect: Rect) -> Rect:
        return apply(rect, self.scale, self.offset)
