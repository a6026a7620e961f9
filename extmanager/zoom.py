"""Zoom and pan state for a picture shown inside a fixed-size area."""

from __future__ import annotations

from dataclasses import dataclass

ZOOM_STEP = 0.5
ZOOM_MIN = 0.5
ZOOM_MAX = 5.0


def _clamp(value: float, low: float, high: float) -> float:
    # Same evaluation order as the classic CLAMP macro: the upper bound wins
    # when the bounds are inverted.
    if value > high:
        return high
    if value < low:
        return low
    return value


@dataclass(frozen=True)
class Layout:
    """Where and how large the picture is drawn inside the area."""

    x: float
    y: float
    width: float
    height: float


class ZoomPicture:
    """Tracks zoom level and pan offset of a picture and lays it out.

    The picture is fitted to the area, scaled by the zoom level, centred,
    and shifted by the pan offset as far as its borders allow.
    """

    zoom_level_min = ZOOM_MIN
    zoom_level_max = ZOOM_MAX
    zoom_level_step = ZOOM_STEP

    def __init__(self, zoom_level: float = 1.0) -> None:
        self._zoom_level = 1.0
        self.zoom_level = zoom_level

        self.image_x = 0.0
        self.image_y = 0.0

        self._gesture_start_zoom = self._zoom_level
        self._gesture_image_start_x = 0.0
        self._gesture_image_start_y = 0.0
        self._gesture_touch_start_x = 0.0
        self._gesture_touch_start_y = 0.0

    @property
    def zoom_level(self) -> float:
        """Current zoom factor, kept between the minimum and maximum."""
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, value: float) -> None:
        self._zoom_level = _clamp(float(value), ZOOM_MIN, ZOOM_MAX)

    def compute_layout(
        self,
        width: float,
        height: float,
        paintable_width: float,
        paintable_height: float,
    ) -> Layout:
        """Lay the picture out in an area of the given size.

        Constrains the stored pan offset to the picture's borders, resetting
        it along an axis where the picture does not overflow the area.
        Raises ValueError if the picture has no positive size.
        """
        if paintable_width <= 0 or paintable_height <= 0:
            raise ValueError("Picture size must be positive")

        scale_factor = width / paintable_width
        scaled_width = paintable_width * scale_factor
        scaled_height = paintable_height * scale_factor

        if scaled_height > height:
            scale_factor = height / paintable_height
            scaled_width = paintable_width * scale_factor
            scaled_height = paintable_height * scale_factor

        scaled_width *= self._zoom_level
        scaled_height *= self._zoom_level

        x = (width - scaled_width) / 2
        y = (height - scaled_height) / 2

        self.image_x = _clamp(self.image_x, x, -x)
        self.image_y = _clamp(self.image_y, y, -y)

        if scaled_width > width:
            x += self.image_x
        else:
            self.image_x = 0.0

        if scaled_height > height:
            y += self.image_y
        else:
            self.image_y = 0.0

        return Layout(x=x, y=y, width=scaled_width, height=scaled_height)

    def begin_gesture(self, center_x: float, center_y: float) -> None:
        """Record the starting zoom, pan offset and touch point of a gesture."""
        self._gesture_start_zoom = self._zoom_level
        self._gesture_image_start_x = self.image_x
        self._gesture_image_start_y = self.image_y
        self._gesture_touch_start_x = center_x
        self._gesture_touch_start_y = center_y

    def update_scale(self, scale: float, center_x: float, center_y: float) -> None:
        """Apply a pinch: scale the starting zoom and follow the touch centre."""
        self.zoom_level = self._gesture_start_zoom * scale
        self.image_x = self._gesture_image_start_x + (center_x - self._gesture_touch_start_x)
        self.image_y = self._gesture_image_start_y + (center_y - self._gesture_touch_start_y)

    def update_drag(self, offset_x: float, offset_y: float) -> None:
        """Apply a drag by the given offset from where the gesture began."""
        self.image_x = self._gesture_image_start_x + offset_x
        self.image_y = self._gesture_image_start_y + offset_y