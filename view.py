from __future__ import annotations

from typing import Tuple

import config

Point = Tuple[float, float]


class ViewTransform:
    """Zoom and pan mapping between screen and scene coordinates.

    screen = scene * zoom + pan, so scene = (screen - pan) / zoom.
    Zoom moves in fixed steps and is kept inside [ZOOM_MIN, ZOOM_MAX].
    """

    def __init__(self, zoom: float = 1.0, pan_x: float = 0.0, pan_y: float = 0.0) -> None:
        self.zoom = zoom
        self.pan_x = pan_x
        self.pan_y = pan_y

    @property
    def pan(self) -> Point:
        return (self.pan_x, self.pan_y)

    def to_scene(self, point: Point) -> Point:
        """Description: Screen to scene
        Inputs: point: Point
        """
        return ((point[0] - self.pan_x) / self.zoom, (point[1] - self.pan_y) / self.zoom)

    def to_screen(self, point: Point) -> Point:
        """Description: Scene to screen
        Inputs: point: Point
        """
        return (point[0] * self.zoom + self.pan_x, point[1] * self.zoom + self.pan_y)

    def zoom_in(self) -> bool:
        """Description: Step zoom up, returns False at the upper bound
        Inputs: None
        """
        return self._set_zoom(self.zoom + config.ZOOM_STEP)

    def zoom_out(self) -> bool:
        """Description: Step zoom down, returns False at the lower bound
        Inputs: None
        """
        return self._set_zoom(self.zoom - config.ZOOM_STEP)

    def _set_zoom(self, value: float) -> bool:
        # Rounded so repeated steps land exactly on the bounds.
        new_zoom = round(min(config.ZOOM_MAX, max(config.ZOOM_MIN, value)), 6)
        if new_zoom == self.zoom:
            return False
        self.zoom = new_zoom
        return True

    def pan_to_anchor(self, anchor: Point, screen_point: Point) -> None:
        """Description: Move pan so the scene point anchor sits under screen_point
        Inputs: anchor: Point, screen_point: Point
        """
        self.pan_x = screen_point[0] - anchor[0] * self.zoom
        self.pan_y = screen_point[1] - anchor[1] * self.zoom

    def reset(self) -> None:
        self.zoom = 1.0
        self.pan_x = 0.0
        self.pan_y = 0.0
